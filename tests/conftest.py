"""
Shared fixtures: parser-shaped sieve trees.
"""
import pytest


def comment_node(*lines):
    """Build an annotation doc comment node from ``@...`` lines."""
    body = "".join(f" * {line}\r\n" for line in lines)
    return {"Type": "Comment", "Text": f"/**\r\n{body} */"}


def header_test(match="Contains", keys=("hello",), headers=("Subject",)):
    return {
        "Type": "Header",
        "Headers": list(headers),
        "Keys": list(keys),
        "Match": {"Type": match},
        "Format": None,
    }


def address_test(match="Is", keys=("bob@example.com",), headers=("From",)):
    return {
        "Type": "Address",
        "Headers": list(headers),
        "Keys": list(keys),
        "Match": {"Type": match},
        "Address": {"Type": "all"},
    }


def attachments_test():
    return {"Type": "Exists", "Headers": ["X-Attached"]}


def negate(test):
    return {"Type": "Not", "Test": test}


def if_node(tests, then=None, operator="allof"):
    return {
        "Type": "If",
        "If": {"Type": operator, "Tests": list(tests)},
        "Then": list(then) if then is not None else [{"Type": "Keep"}],
    }


def script(*nodes, require=("fileinto", "imap4flags")):
    tree = []
    if require:
        tree.append({"Type": "Require", "List": list(require)})
    tree.extend(nodes)
    return tree


@pytest.fixture
def sieve():
    """Tree building helpers."""
    class Builders:
        comment = staticmethod(comment_node)
        header = staticmethod(header_test)
        address = staticmethod(address_test)
        attachments = staticmethod(attachments_test)
        negate = staticmethod(negate)
        if_node = staticmethod(if_node)
        script = staticmethod(script)

    return Builders


@pytest.fixture
def subject_filter():
    """A complete simple filter as produced by the filter editor."""
    return [
        {"Type": "Require", "List": ["fileinto", "imap4flags"]},
        comment_node("@type and", "@comparator starts", "@comparator !contains"),
        if_node(
            [
                header_test(match="Matches", keys=("invoice*",)),
                negate(address_test(match="Contains", keys=("example.com",), headers=("To", "Cc"))),
            ],
            then=[
                {"Type": "FileInto", "Name": "Invoices"},
                {"Type": "AddFlag", "Flags": ["\\Seen"]},
            ],
        ),
    ]

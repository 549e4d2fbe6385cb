"""Lookup tables shared by the simple filter conversion.

Read-only: the module-level proxies cannot be modified at runtime.
"""

from types import MappingProxyType

# Simple operator -> sieve test list
OPERATOR_KEYS = MappingProxyType({
    "all": "allof",
    "any": "anyof",
})

# Simple comparator -> sieve match type
MATCH_KEYS = MappingProxyType({
    "is": "Is",
    "contains": "Contains",
    "matches": "Matches",
    "starts": "Starts",
    "ends": "Ends",
})

LABEL_KEYS = MappingProxyType({
    "all": "All",
    "any": "Any",
    "attachments": "Attachments",
    "recipient": "Recipient",
    "sender": "Sender",
    "subject": "Subject",
    "contains": "contains",
    "is": "is exactly",
    "matches": "matches",
    "starts": "begins with",
    "ends": "ends with",
    "!contains": "does not contain",
    "!is": "is not",
    "!matches": "does not match",
    "!starts": "does not begin with",
    "!ends": "does not end with",
})

# Extensions every simple filter script must require
REQUIRED_EXTENSIONS = ("fileinto", "imap4flags")

# Folder a Discard action files into
TRASH_FOLDER = "trash"

ANNOTATION_TYPES = MappingProxyType({
    "and": "all",
    "or": "any",
})

"""Enumeration types for the loan book domain."""

from enum import Enum


class LoanKind(str, Enum):
    SIMPLE = "SIMPLE"
    COMPOUND = "COMPOUND"


class LoanState(str, Enum):
    ACTIVE = "ACTIVE"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"


class SortKey(str, Enum):
    NAME = "name"
    OVERDUE = "overdue"
    AMOUNT = "amount"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class RegistryState(str, Enum):
    EDITABLE = "EDITABLE"
    LOCKED = "LOCKED"


class ChangeKind(str, Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    REPLACE = "REPLACE"
    RESET = "RESET"
    SORT = "SORT"
    REFRESH = "REFRESH"

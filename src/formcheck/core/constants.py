"""
Constants for form field validation.

This module defines:
- Character sets used by the field rule kinds
- Fixed widths for identifier fields
- User-facing failure messages
"""

# Character Sets

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "1234567890"
ALPHANUMERIC = LETTERS + DIGITS

# First character of a required delivery date code
RDD_FIRST_CHARS = DIGITS + "BCDEFGHJKLMNPRSTUVW"

DATE_CHARS = DIGITS + "/"
DATE_SEPARATOR = "/"

# Field Widths

CONTRACT_ID_LENGTH = 13
CONTRACT_ID_NUMERIC_SLICE = slice(6, 8)
ITEM_ID_LENGTH = 13
RDD_LENGTH = 3

MAX_MONTH_DIGITS = 2
MAX_DAY_DIGITS = 2
YEAR_DIGITS = 4

# Form Input Types

UNNORMALIZED_INPUT_TYPES = frozenset({"hidden", "submit"})

PASSWORD_FIELD = "passwd"
PASSWORD_CONFIRM_FIELD = "passwd_confirm"

# Messages

MSG_DISALLOWED_CHARACTER = "Invalid characters found in field"
MSG_WRONG_LENGTH = "Invalid number of characters.  Must be {length} characters."
MSG_EMPTY_REQUIRED = "A value is required for this field."

MSG_DATE_CHARACTERS = "Invalid characters in date - (use MM/DD/YYYY format)!"
MSG_DATE_FORMAT = "Invalid date format - (use MM/DD/YYYY format)!"
MSG_DATE_CALENDAR = "Invalid date (check your calendar)!"

MSG_CONTRACT_EMPTY = "Please specify the new Contract ID in the space provided."
MSG_CONTRACT_LENGTH = "Invalid Contract ID : Must be 13 characters."
MSG_CONTRACT_CHARACTERS = "Invalid Contract ID : Only letters (A-Z) and numbers (0-9) permitted."
MSG_CONTRACT_NUMERIC = "Invalid Contract ID : Characters in positions 7 and 8 must be numeric."

MSG_ITEM_LENGTH = "Invalid item NSN : Must be 13 characters."
MSG_ITEM_CHARACTERS = "Invalid item NSN : Only letters (A-Z) and numbers (0-9) permitted."

MSG_RDD_LENGTH = "Invalid RDD: Must be 3 alphanumeric characters."
MSG_RDD_FIRST = "Invalid RDD: first character is invalid."
MSG_RDD_DIGITS = "Invalid RDD: second two characters must be numeric."

MSG_PASSWORD_MISMATCH = "The password confirmation does not match the password.  Please reenter."

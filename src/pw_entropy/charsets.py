from __future__ import annotations

import string
from typing import Tuple

REPLACE_CHARS = "!@$&*"
SEPARATOR_CHARS = "_-., "
# ASCII punctuation not claimed above; the backtick belongs to no class.
OTHER_SPECIAL_CHARS = "\"#%'()+/:;<=>?[\\]^{|}~"
LOWER_CHARS = string.ascii_lowercase
UPPER_CHARS = string.ascii_uppercase
DIGIT_CHARS = string.digits

# (name, members) in classification order.
CHARACTER_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("replace", REPLACE_CHARS),
    ("separator", SEPARATOR_CHARS),
    ("other_special", OTHER_SPECIAL_CHARS),
    ("lower", LOWER_CHARS),
    ("upper", UPPER_CHARS),
    ("digit", DIGIT_CHARS),
)

# Common passwords and keyboard runs stripped before measuring. Each entry is
# removed completely before the next one is tried, so order is significant.
COMMON_SEQUENCES: Tuple[str, ...] = (
    "asdf",
    "jkl;",
    ";lkj",
    "fdsa",
    "asdfghjkl",
    "asdf ;lkj",
    "0123456789",
    "qwertyuiop",
    "qwerty",
    "zxcvbnm",
    "abcdefghijklmnopqrstuvwxyz",
    "password1",
    "password!",
    "password",
    "Password",
    "assword",
    "picture1",
    "Picture1",
    "picture",
    "Picture",
    "asdf",
    "rty567",
    "senha",
    "abc123",
    "Million2",
    "000000",
    "1234",
    "iloveyou",
    "aaron431",
    "qqww1122",
    "123123",
)

import logging

from .errors import UnwrapOnNoneError
from .option import (
    Option,
    MISSING,
    UNIVERSAL_NOMINALITY,
    UNWRAP_MESSAGE,
    is_option,
    some,
    none,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

from_nullish = Option.from_nullish
from_nullable = Option.from_nullable
from_optional = Option.from_optional

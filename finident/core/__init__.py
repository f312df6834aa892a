"""finident.core: result type, error values, grammars and the shared construction pipeline."""

from finident.core.errors import (
    IdentError as IdentError,
)
from finident.core.errors import (
    IncorrectCheckCharacterError as IncorrectCheckCharacterError,
)
from finident.core.errors import (
    InvalidComponentFormatError as InvalidComponentFormatError,
)
from finident.core.errors import (
    InvalidFormatError as InvalidFormatError,
)
from finident.core.errors import (
    InvalidValueError as InvalidValueError,
)
from finident.core.grammar import (
    CheckScheme as CheckScheme,
)
from finident.core.grammar import (
    Component as Component,
)
from finident.core.grammar import (
    Grammar as Grammar,
)
from finident.core.grammar import (
    normalize as normalize,
)
from finident.core.result import (
    Err as Err,
)
from finident.core.result import (
    Ok as Ok,
)
from finident.core.result import (
    Result as Result,
)
from finident.core.result import (
    sequence as sequence,
)
from finident.core.result import (
    unwrap as unwrap,
)
from finident.core.serialization import (
    canonical_bytes as canonical_bytes,
)
from finident.core.serialization import (
    from_json as from_json,
)
from finident.core.serialization import (
    to_json as to_json,
)
from finident.core.types import (
    UtcDatetime as UtcDatetime,
)

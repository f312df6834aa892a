"""finident.ccs: check character systems.

CUSIP, FIGI and ISIN use a single decimal check digit (two incompatible
"double-add-double" variants); LEI uses two check digits from ISO/IEC 7064
MOD 97-10.
"""

from finident.ccs.char_value import (
    char_value as char_value,
)
from finident.ccs.double_add_double import (
    CusipVariant as CusipVariant,
)
from finident.ccs.double_add_double import (
    IsinVariant as IsinVariant,
)
from finident.ccs.iso7064 import (
    check_digits as check_digits,
)
from finident.ccs.iso7064 import (
    compute_check_digits as compute_check_digits,
)
from finident.ccs.iso7064 import (
    mod97_10 as mod97_10,
)

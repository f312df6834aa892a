"""finident.ident: identifier value types."""

from finident.ident.cik import (
    Cik as Cik,
)
from finident.ident.country import (
    CountryCode as CountryCode,
)
from finident.ident.country import (
    CountryCodeAlpha2 as CountryCodeAlpha2,
)
from finident.ident.country import (
    CountryCodeAlpha3 as CountryCodeAlpha3,
)
from finident.ident.country import (
    CountryCodeNumeric3 as CountryCodeNumeric3,
)
from finident.ident.country import (
    country_code_from_string as country_code_from_string,
)
from finident.ident.country import (
    country_code_from_string_strict as country_code_from_string_strict,
)
from finident.ident.currency import (
    CurrencyCode as CurrencyCode,
)
from finident.ident.currency import (
    CurrencyCodeAlpha3 as CurrencyCodeAlpha3,
)
from finident.ident.currency import (
    CurrencyCodeNumeric3 as CurrencyCodeNumeric3,
)
from finident.ident.currency import (
    currency_code_from_string as currency_code_from_string,
)
from finident.ident.currency import (
    currency_code_from_string_strict as currency_code_from_string_strict,
)
from finident.ident.cusip import (
    Cusip as Cusip,
)
from finident.ident.ein import (
    Ein as Ein,
)
from finident.ident.figi import (
    Figi as Figi,
)
from finident.ident.isin import (
    Isin as Isin,
)
from finident.ident.lei import (
    Lei as Lei,
)
from finident.ident.mic import (
    Mic as Mic,
)
from finident.ident.sic import (
    SicCode as SicCode,
)
from finident.ident.sic import (
    SicDivisionCode as SicDivisionCode,
)
from finident.ident.sic import (
    SicIndustryCode as SicIndustryCode,
)
from finident.ident.sic import (
    SicIndustryGroupCode as SicIndustryGroupCode,
)
from finident.ident.sic import (
    SicMajorGroupCode as SicMajorGroupCode,
)
from finident.ident.sic import (
    sic_code_from_string as sic_code_from_string,
)
from finident.ident.sic import (
    sic_code_from_string_strict as sic_code_from_string_strict,
)

"""Closed list of LEIs issued with check digits that fail ISO 17442.

124 entries GLEIF continues to recognize (Data Quality Feedback, 2021-02-18).
Each row is (index, LEI, initial registration timestamp, registration status).
The lookup index is built on first use and is read-only thereafter.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import final

from finident.core.result import unwrap
from finident.core.types import UtcDatetime


class RegistrationStatus(Enum):
    ISSUED = "Issued"
    LAPSED = "Lapsed"
    MERGED = "Merged"
    RETIRED = "Retired"


@final
@dataclass(frozen=True, slots=True)
class WhitelistEntry:
    index: int
    lei: str
    timestamp: UtcDatetime
    registration_status: RegistrationStatus


# fmt: off
_ROWS: tuple[tuple[int, str, str, str], ...] = (
    (0, "315700X8JQ3IU0NGK501", "2013-07-20T00:00:00+02:00", "Issued"),
    (1, "31570010000000006400", "2013-12-30T00:00:00.000+01:00", "Issued"),
    (2, "31570010000000019301", "2014-01-06T00:00:00.000+01:00", "Issued"),
    (3, "31570010000000009601", "2014-01-07T00:00:00.000+01:00", "Issued"),
    (4, "31570010000000025800", "2014-01-10T00:00:00.000+01:00", "Lapsed"),
    (5, "31570010000000029001", "2014-01-13T00:00:00.000+01:00", "Issued"),
    (6, "31570010000000035500", "2014-01-13T00:00:00.000+01:00", "Lapsed"),
    (7, "31570010000000038701", "2014-01-15T00:00:00.000+01:00", "Merged"),
    (8, "31570010000000045200", "2014-01-16T00:00:00.000+01:00", "Issued"),
    (9, "31570010000000048401", "2014-01-16T00:00:00.000+01:00", "Issued"),
    (10, "31570010000000054900", "2014-01-16T00:00:00.000+01:00", "Issued"),
    (11, "31570010000000064600", "2014-01-20T00:00:00.000+01:00", "Issued"),
    (12, "31570010000000067801", "2014-01-21T00:00:00.000+01:00", "Issued"),
    (13, "31570010000000077501", "2014-01-21T00:00:00.000+01:00", "Issued"),
    (14, "31570010000000103400", "2014-01-23T00:00:00.000+01:00", "Issued"),
    (15, "31570010000000116301", "2014-01-23T00:00:00.000+01:00", "Issued"),
    (16, "31570010000000084000", "2014-01-23T00:00:00.000+01:00", "Lapsed"),
    (17, "31570010000000087201", "2014-01-24T00:00:00.000+01:00", "Lapsed"),
    (18, "31570010000000096901", "2014-01-24T00:00:00.000+01:00", "Issued"),
    (19, "31570010000000106601", "2014-01-24T00:00:00.000+01:00", "Issued"),
    (20, "31570010000000122800", "2014-01-28T00:00:00.000+01:00", "Issued"),
    (21, "31570010000000126001", "2014-01-28T00:00:00.000+01:00", "Issued"),
    (22, "31570020000000005900", "2014-01-28T00:00:00.000+01:00", "Issued"),
    (23, "3157006I3B6RSTPQLI00", "2014-01-29T00:00:00.000+01:00", "Issued"),
    (24, "315700M5843O6DU83901", "2014-01-29T00:00:00.000+01:00", "Issued"),
    (25, "3157008ZY7CW6LVU5J00", "2014-01-30T00:00:00.000+01:00", "Issued"),
    (26, "3157008KD17KROO7UT01", "2014-01-30T00:00:00.000Z", "Issued"),
    (27, "315700D23JL5C1DZNT00", "2014-01-31T00:00:00.000+01:00", "Issued"),
    (28, "315700TF5Z7T28HZJK01", "2014-01-31T00:00:00.000+01:00", "Lapsed"),
    (29, "3157008VKYORMUNC5O01", "2014-02-03T00:00:00.000+01:00", "Lapsed"),
    (30, "315700VMAJZ9JZTXNQ00", "2014-02-03T00:00:00.000+01:00", "Issued"),
    (31, "3157002CKDQOCIHE5H01", "2014-02-03T00:00:00.000+01:00", "Issued"),
    (32, "315700JXUHL9H2C3P700", "2014-02-03T00:00:00.000+01:00", "Issued"),
    (33, "315700WH3YMKHCVYW201", "2014-02-04T00:00:00.000+01:00", "Issued"),
    (34, "315700Q1S8O1UORF9700", "2014-02-04T00:00:00.000+01:00", "Issued"),
    (35, "3157005P1M669LB5QO01", "2014-02-05T00:00:00.000+01:00", "Merged"),
    (36, "315700WYOZ6994UATN00", "2014-02-06T00:00:00.000+01:00", "Issued"),
    (37, "315700VG7PTE9EJJRX01", "2014-02-07T00:00:00.000+01:00", "Issued"),
    (38, "315700DJ07P6OX10FK01", "2014-02-07T00:00:00.000+01:00", "Retired"),
    (39, "315700JKZH6I0067ND01", "2014-02-07T00:00:00.000+01:00", "Lapsed"),
    (40, "315700P6TZOLP92KN801", "2014-02-10T00:00:00.000+01:00", "Issued"),
    (41, "315700UYFD5GF9R13F01", "2014-02-10T00:00:00.000+01:00", "Issued"),
    (42, "315700GXBGM8DBYKHF01", "2014-02-11T00:00:00.000+01:00", "Issued"),
    (43, "315700S3TF79ALV82F01", "2014-02-11T00:00:00.000+01:00", "Issued"),
    (44, "315700JO5E28SRE00Q01", "2014-02-11T00:00:00.000+01:00", "Issued"),
    (45, "315700PXKOSX7WQV4N00", "2014-02-11T00:00:00.000+01:00", "Issued"),
    (46, "315700HZU4SMI8LZTU00", "2014-02-12T00:00:00.000+01:00", "Issued"),
    (47, "315700Y1W7W1JHAUBW00", "2014-02-12T00:00:00.000+01:00", "Issued"),
    (48, "315700S22RGYRIEEOT00", "2014-02-13T00:00:00.000+01:00", "Issued"),
    (49, "315700TCC9NTEP7J8Z01", "2014-02-13T00:00:00Z", "Issued"),
    (50, "315700DKCD4QSKLAMO01", "2014-02-14T00:00:00.000+01:00", "Lapsed"),
    (51, "31570067WSCDST0S3F01", "2014-02-14T00:00:00.000+01:00", "Issued"),
    (52, "315700MBYPT6PGKO7M01", "2014-02-14T00:00:00.000+01:00", "Issued"),
    (53, "315700G5G24XYL1TXH00", "2014-02-17T00:00:00.000+01:00", "Issued"),
    (54, "315700WZPEIS41QDKE00", "2014-02-17T00:00:00.000+01:00", "Issued"),
    (55, "315700N0VEIBHP0NPQ01", "2014-02-18T00:00:00.000+01:00", "Issued"),
    (56, "315700ET7M7VQ4C84R00", "2014-02-20T00:00:00.000+01:00", "Issued"),
    (57, "315700MW2F0KFR45QW01", "2014-02-20T00:00:00.000+01:00", "Issued"),
    (58, "315700P89WR82VNB8Z00", "2014-02-20T00:00:00.000+01:00", "Issued"),
    (59, "315700P40OV6BT045900", "2014-02-24T00:00:00.000+01:00", "Lapsed"),
    (60, "315700RTEHY362KXWJ00", "2014-02-26T00:00:00.000+01:00", "Issued"),
    (61, "315700TWGZ89LLSRS000", "2014-02-27T00:00:00.000+01:00", "Lapsed"),
    (62, "315700XE21UYOA3GAC01", "2014-02-27T00:00:00.000+01:00", "Issued"),
    (63, "3157009OVCV07O4HXM00", "2014-02-28T00:00:00.000+01:00", "Issued"),
    (64, "315700PLI0I7W8IOV400", "2014-03-03T00:00:00.000+01:00", "Issued"),
    (65, "315700ADOXDR5PCY5400", "2014-03-03T00:00:00.000+01:00", "Lapsed"),
    (66, "315700PN3J57ZUNF1V00", "2014-03-03T00:00:00.000+01:00", "Issued"),
    (67, "3157001TPR6K4GBTLN00", "2014-03-03T00:00:00.000+01:00", "Issued"),
    (68, "315700K7NYVSQJNTN401", "2014-03-04T00:00:00.000+01:00", "Merged"),
    (69, "315700LDDN3RM7Y2MP00", "2014-03-07T00:00:00.000+01:00", "Lapsed"),
    (70, "315700O666JVNCQU9X00", "2014-03-07T00:00:00.000+01:00", "Lapsed"),
    (71, "3157009FTHFDDK7FHW01", "2014-03-12T00:00:00.000+01:00", "Lapsed"),
    (72, "315700BM9Z39TNTGQW00", "2014-03-13T00:00:00.000+01:00", "Issued"),
    (73, "3157006FR3JBBOLOMX01", "2014-03-14T00:00:00.000+01:00", "Lapsed"),
    (74, "315700QGM4XWZE1I5N01", "2014-03-20T00:00:00.000+01:00", "Issued"),
    (75, "315700OASRCM664PAW01", "2014-03-21T00:00:00.000+01:00", "Issued"),
    (76, "315700T2EEQAPBO0C301", "2014-03-25T00:00:00.000+01:00", "Issued"),
    (77, "315700EIYO2TLSEGQ700", "2014-03-26T00:00:00.000+01:00", "Retired"),
    (78, "315700YS6RQ5TF3VBP01", "2014-03-27T00:00:00.000+01:00", "Issued"),
    (79, "3157001K2LAL04D87901", "2014-04-07T00:00:00.000+01:00", "Merged"),
    (80, "31570058O0Z320C4GZ00", "2014-04-09T00:00:00.000+01:00", "Merged"),
    (81, "315700X40GNCOUWJYR00", "2014-04-17T00:00:00.000+01:00", "Issued"),
    (82, "315700I3W2AFHP8MNQ01", "2014-04-22T00:00:00.000+01:00", "Issued"),
    (83, "315700XI4Z8GF5BDUJ01", "2014-04-23T00:00:00.000+01:00", "Lapsed"),
    (84, "315700PGTT5GWZRJG000", "2014-05-07T00:00:00.000+01:00", "Merged"),
    (85, "315700NNMGS8F3P2CN00", "2014-06-05T00:00:00.000+01:00", "Issued"),
    (86, "3157006B6JVZ5DFMSN00", "2014-06-25T00:00:00.000+01:00", "Lapsed"),
    (87, "315700OVW93X0T3HP200", "2014-06-25T00:00:00.000+01:00", "Issued"),
    (88, "315700B8401GTFFY6X01", "2014-06-27T00:00:00.000+01:00", "Issued"),
    (89, "315700RK8M4FAHMYAP01", "2014-07-04T00:00:00.000+01:00", "Issued"),
    (90, "315700EZSEA51937KX01", "2014-07-08T00:00:00.000+01:00", "Issued"),
    (91, "315700XSCP1S8WOD8E01", "2014-07-30T00:00:00.000+01:00", "Issued"),
    (92, "315700BZ5F7DRYG2UM00", "2014-08-07T00:00:00.000+01:00", "Issued"),
    (93, "315700Y5JNQMMUF5ID01", "2014-08-07T00:00:00.000+01:00", "Issued"),
    (94, "315700P4N9VSLK5QZV01", "2014-09-05T00:00:00.000+01:00", "Lapsed"),
    (95, "3157005WT1SENAE17R00", "2014-09-23T00:00:00.000+01:00", "Issued"),
    (96, "315700659AALVVLVIO01", "2014-10-08T00:00:00.000+01:00", "Merged"),
    (97, "3157006KT1EZ15OIXW00", "2014-11-03T00:00:00.000+01:00", "Lapsed"),
    (98, "3157005VJE7A3MBUS201", "2014-11-03T00:00:00.000+01:00", "Issued"),
    (99, "315700JICZ3SY5SAXX00", "2014-11-18T00:00:00.000+01:00", "Issued"),
    (100, "315700UKZXWXEO126601", "2014-12-03T00:00:00.000+01:00", "Issued"),
    (101, "3157004PTVTDOKB46401", "2014-12-19T00:00:00.000+01:00", "Issued"),
    (102, "31570029808HJVCNFA01", "2014-12-30T00:00:00.000+01:00", "Merged"),
    (103, "3157006DE3SPNIUY9K01", "2015-01-16T00:00:00.000+01:00", "Lapsed"),
    (104, "315700TXNX10N8XH4K00", "2015-01-20T00:00:00.000+01:00", "Lapsed"),
    (105, "3157001KM8GOU7PXZY01", "2015-03-02T00:00:00.000+01:00", "Issued"),
    (106, "315700XEFYMA5EZ0P500", "2015-03-06T00:00:00.000+01:00", "Lapsed"),
    (107, "3157004R6CH6C1P4KX00", "2015-04-20T00:00:00.000+01:00", "Issued"),
    (108, "315700LWYOZNQ7V1T100", "2015-04-29T00:00:00.000+01:00", "Issued"),
    (109, "315700T6T49EDM16YO01", "2015-05-07T00:00:00.000+01:00", "Issued"),
    (110, "315700A0UB9Q7DOQIZ00", "2015-05-11T00:00:00.000+01:00", "Issued"),
    (111, "315700HS7WJ1B0SUWM01", "2015-05-14T00:00:00.000+01:00", "Issued"),
    (112, "315700GZA843JXKTJ400", "2015-05-29T00:00:00.000+01:00", "Issued"),
    (113, "315700HXOEOK58E58P01", "2015-06-05T00:00:00.000+01:00", "Issued"),
    (114, "3157005RUI28M8FANK00", "2015-06-23T00:00:00.000+01:00", "Issued"),
    (115, "3157003FQSSGS9OZ9E01", "2015-07-02T00:00:00.000+01:00", "Lapsed"),
    (116, "315700VITYR7AL4M9S01", "2015-07-08T00:00:00.000+01:00", "Issued"),
    (117, "315700T8U7IU4W8J3A01", "2015-08-06T00:00:00Z", "Lapsed"),
    (118, "3157001MLDD3SDFQA901", "2015-08-26T00:00:00.000+01:00", "Lapsed"),
    (119, "315700OFW4YCOBNX4U01", "2015-09-14T00:00:00.000+01:00", "Lapsed"),
    (120, "315700WR4IHOO1M5LP00", "2015-10-08T00:00:00.000+01:00", "Lapsed"),
    (121, "315700UJ6N4LGKLNPB00", "2015-10-13T00:00:00.000+01:00", "Issued"),
    (122, "315700BBRQHDWX6SHZ00", "2015-10-26T00:00:00Z", "Issued"),
    (123, "3157000VAJWZ3P8ZED00", "2015-11-09T00:00:00.000+01:00", "Issued"),
)
# fmt: on


@functools.cache
def entries() -> tuple[WhitelistEntry, ...]:
    """All whitelist entries, in index order."""
    return tuple(
        WhitelistEntry(
            index=index,
            lei=lei,
            timestamp=unwrap(UtcDatetime.parse_iso(timestamp)),
            registration_status=RegistrationStatus(status),
        )
        for index, lei, timestamp, status in _ROWS
    )


@functools.cache
def lookup() -> dict[str, WhitelistEntry]:
    return {e.lei: e for e in entries()}


def get(value: str) -> WhitelistEntry | None:
    """The entry for an already normalized LEI string, if whitelisted."""
    return lookup().get(value)


def contains(value: str) -> bool:
    """True if ``value`` (uppercase, no whitespace) is a whitelisted LEI."""
    return value in lookup()


def initialize() -> None:
    """Build the lookup index now rather than on first use."""
    lookup()

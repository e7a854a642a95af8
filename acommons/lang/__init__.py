"""Language-level helpers: strings, URLs, dates, wildcards, punycode,
delayed execution, file locking and weak references."""

from acommons.lang.dates import (
    add_days,
    add_months,
    days_between,
    end_of_day,
    from_http_date,
    from_iso_string,
    is_same_day,
    is_today,
    start_of_day,
    to_http_date,
    to_iso_string,
    utc_now,
)
from acommons.lang.delayed import DelayedExecutor
from acommons.lang.file_locker import FileLocker, locked_path
from acommons.lang.punycode import (
    decode_url,
    encode_url,
    idna_decode,
    idna_encode,
    punycode_decode,
    punycode_encode,
)
from acommons.lang.refs import WeakHandle, assign_weak, weak_callback
from acommons.lang.strings import (
    ascii_lowercase,
    contains,
    count_occurrences,
    index_of,
    is_blank,
    md5_hex,
    replace_all,
    sha256_hex,
    split_with_escape,
    trim_whitespace,
    truncate,
)
from acommons.lang.urls import (
    append_path,
    domain,
    host_with_port,
    is_http_url,
    query_parameters,
    with_query_parameters,
)
from acommons.lang.wildcard import Wildcard, is_wildcard, wildcard_match

__all__ = [
    "DelayedExecutor",
    "FileLocker",
    "WeakHandle",
    "Wildcard",
    "add_days",
    "add_months",
    "append_path",
    "ascii_lowercase",
    "assign_weak",
    "contains",
    "count_occurrences",
    "days_between",
    "decode_url",
    "domain",
    "encode_url",
    "end_of_day",
    "from_http_date",
    "from_iso_string",
    "host_with_port",
    "idna_decode",
    "idna_encode",
    "index_of",
    "is_blank",
    "is_http_url",
    "is_same_day",
    "is_today",
    "is_wildcard",
    "locked_path",
    "md5_hex",
    "punycode_decode",
    "punycode_encode",
    "query_parameters",
    "replace_all",
    "sha256_hex",
    "split_with_escape",
    "start_of_day",
    "to_http_date",
    "to_iso_string",
    "trim_whitespace",
    "truncate",
    "utc_now",
    "weak_callback",
    "wildcard_match",
    "with_query_parameters",
]

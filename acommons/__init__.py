"""acommons - common utilities under one import.

Importing the package only binds names: no handlers are configured, no
files are touched and no threads are started.

    from acommons import FileLocker, Logger, Wildcard, idna_encode

    with FileLocker("/run/myapp/update.lock"):
        Logger.log_info("Updating %s", idna_encode("пример.рф"))
"""

from acommons.core.exceptions import (
    ACommonsException,
    ArgumentException,
    FileLockException,
    MustBeOverriddenException,
    NullArgumentException,
    PunycodeException,
    WildcardPatternException,
    must_be_overridden,
    require_argument,
    require_not_none,
)
from acommons.infra.logging import (
    VERBOSE,
    FileLogger,
    Logger,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_context,
    setup_logging,
)
from acommons.lang import (
    DelayedExecutor,
    FileLocker,
    WeakHandle,
    Wildcard,
    add_days,
    add_months,
    append_path,
    ascii_lowercase,
    assign_weak,
    contains,
    count_occurrences,
    days_between,
    decode_url,
    domain,
    encode_url,
    end_of_day,
    from_http_date,
    from_iso_string,
    host_with_port,
    idna_decode,
    idna_encode,
    index_of,
    is_blank,
    is_http_url,
    is_same_day,
    is_today,
    is_wildcard,
    locked_path,
    md5_hex,
    punycode_decode,
    punycode_encode,
    query_parameters,
    replace_all,
    sha256_hex,
    split_with_escape,
    start_of_day,
    to_http_date,
    to_iso_string,
    trim_whitespace,
    truncate,
    utc_now,
    weak_callback,
    wildcard_match,
    with_query_parameters,
)

__version__ = "0.1.0"

__all__ = [
    "ACommonsException",
    "ArgumentException",
    "DelayedExecutor",
    "FileLockException",
    "FileLocker",
    "FileLogger",
    "LogLevel",
    "Logger",
    "MustBeOverriddenException",
    "NullArgumentException",
    "PunycodeException",
    "VERBOSE",
    "WeakHandle",
    "Wildcard",
    "WildcardPatternException",
    "add_days",
    "add_months",
    "append_path",
    "ascii_lowercase",
    "assign_weak",
    "configure_logging",
    "contains",
    "count_occurrences",
    "days_between",
    "decode_url",
    "domain",
    "encode_url",
    "end_of_day",
    "from_http_date",
    "from_iso_string",
    "get_logger",
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
    "must_be_overridden",
    "punycode_decode",
    "punycode_encode",
    "query_parameters",
    "replace_all",
    "require_argument",
    "require_not_none",
    "set_log_context",
    "setup_logging",
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

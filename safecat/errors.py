"""Error descriptions and the fatal error raised when a delivery cannot go on."""

from __future__ import annotations

import errno

FATAL_PREFIX = "safecat: fatal: "
USAGE_PREFIX = "safecat: usage: "

# Codes that always get a value: when the platform lacks the name,
# a negative stand-in is used so the description can still be found.
_CORE_CODES = (
    ("EINTR", -1, "interrupted system call"),
    ("ENOMEM", -2, "out of memory"),
    ("ENOENT", -3, "file does not exist"),
    ("ETXTBSY", -4, "text busy"),
    ("EIO", -5, "input/output error"),
    ("EEXIST", -6, "file already exists"),
    ("ETIMEDOUT", -7, "timed out"),
    ("EINPROGRESS", -8, "operation in progress"),
    ("EAGAIN", -10, "temporary failure"),
    ("EWOULDBLOCK", -9, "input/output would block"),
    ("EPIPE", -11, "broken pipe"),
    ("EPERM", -12, "permission denied"),
    ("EACCES", -13, "access denied"),
    ("ENXIO", -14, "device not configured"),
)

# Codes described only where the platform defines them.
_OPTIONAL_CODES = (
    ("ESRCH", "no such process"),
    ("E2BIG", "argument list too long"),
    ("ENOEXEC", "exec format error"),
    ("EBADF", "file descriptor not open"),
    ("ECHILD", "no child processes"),
    ("EDEADLK", "operation would cause deadlock"),
    ("EFAULT", "bad address"),
    ("ENOTBLK", "not a block device"),
    ("EBUSY", "device busy"),
    ("EXDEV", "cross-device link"),
    ("ENODEV", "device does not support operation"),
    ("ENOTDIR", "not a directory"),
    ("EISDIR", "is a directory"),
    ("EINVAL", "invalid argument"),
    ("ENFILE", "system cannot open more files"),
    ("EMFILE", "process cannot open more files"),
    ("ENOTTY", "not a tty"),
    ("EFBIG", "file too big"),
    ("ENOSPC", "out of disk space"),
    ("ESPIPE", "unseekable descriptor"),
    ("EROFS", "read-only file system"),
    ("EMLINK", "too many links"),
    ("EDOM", "input out of range"),
    ("ERANGE", "output out of range"),
    ("EALREADY", "operation already in progress"),
    ("ENOTSOCK", "not a socket"),
    ("EDESTADDRREQ", "destination address required"),
    ("EMSGSIZE", "message too long"),
    ("EPROTOTYPE", "incorrect protocol type"),
    ("ENOPROTOOPT", "protocol not available"),
    ("EPROTONOSUPPORT", "protocol not supported"),
    ("ESOCKTNOSUPPORT", "socket type not supported"),
    ("EOPNOTSUPP", "operation not supported"),
    ("EPFNOSUPPORT", "protocol family not supported"),
    ("EAFNOSUPPORT", "address family not supported"),
    ("EADDRINUSE", "address already used"),
    ("EADDRNOTAVAIL", "address not available"),
    ("ENETDOWN", "network down"),
    ("ENETUNREACH", "network unreachable"),
    ("ENETRESET", "network reset"),
    ("ECONNABORTED", "connection aborted"),
    ("ECONNRESET", "connection reset"),
    ("ENOBUFS", "out of buffer space"),
    ("EISCONN", "already connected"),
    ("ENOTCONN", "not connected"),
    ("ESHUTDOWN", "socket shut down"),
    ("ETOOMANYREFS", "too many references"),
    ("ECONNREFUSED", "connection refused"),
    ("ELOOP", "symbolic link loop"),
    ("ENAMETOOLONG", "file name too long"),
    ("EHOSTDOWN", "host down"),
    ("EHOSTUNREACH", "host unreachable"),
    ("ENOTEMPTY", "directory not empty"),
    ("EPROCLIM", "too many processes"),
    ("EUSERS", "too many users"),
    ("EDQUOT", "disk quota exceeded"),
    ("ESTALE", "stale NFS file handle"),
    ("EREMOTE", "too many levels of remote in path"),
    ("EBADRPC", "RPC structure is bad"),
    ("ERPCMISMATCH", "RPC version mismatch"),
    ("EPROGUNAVAIL", "RPC program unavailable"),
    ("EPROGMISMATCH", "program version mismatch"),
    ("EPROCUNAVAIL", "bad procedure for program"),
    ("ENOLCK", "no locks available"),
    ("ENOSYS", "system call not available"),
    ("EFTYPE", "bad file type"),
    ("EAUTH", "authentication error"),
    ("ENEEDAUTH", "not authenticated"),
    ("ENOSTR", "not a stream device"),
    ("ETIME", "timer expired"),
    ("ENOSR", "out of stream resources"),
    ("ENOMSG", "no message of desired type"),
    ("EBADMSG", "bad message type"),
    ("EIDRM", "identifier removed"),
    ("ENONET", "machine not on network"),
    ("ERREMOTE", "object not local"),
    ("ENOLINK", "link severed"),
    ("EADV", "advertise error"),
    ("ESRMNT", "srmount error"),
    ("ECOMM", "communication error"),
    ("EPROTO", "protocol error"),
    ("EMULTIHOP", "multihop attempted"),
    ("EREMCHG", "remote address changed"),
)


def _build_table() -> dict[int, str]:
    # Earlier entries win where two names share a code (e.g. EAGAIN/EWOULDBLOCK).
    table: dict[int, str] = {0: "no error"}
    for name, fallback, text in _CORE_CODES:
        table.setdefault(getattr(errno, name, fallback), text)
    for name, text in _OPTIONAL_CODES:
        code = getattr(errno, name, None)
        if code is not None:
            table.setdefault(code, text)
    return table


_DESCRIPTIONS = _build_table()


def error_str(code: int | None) -> str:
    """Return a short description of an errno value."""
    if code is None:
        return "unknown error"
    return _DESCRIPTIONS.get(code, "unknown error")


class FatalError(Exception):
    """A condition that ends the program with a message and an exit code.

    ``message`` is the full text to report; when ``errno_value`` is given,
    the description of that system error is appended to it.
    """

    def __init__(self, message: str, exit_code: int = 111, errno_value: int | None = None):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.errno_value = errno_value

    def render(self) -> str:
        """Return the line to write to standard error, without a newline."""
        if self.errno_value is None:
            return self.message
        return self.message + error_str(self.errno_value)

    def __str__(self) -> str:
        return self.render()
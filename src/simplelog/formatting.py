"""Line rendering: severity tags, newline escaping and operand joining."""

from simplelog.config import LogLevel

RESET = "\x1b[m"
ESCAPED_NEWLINE = "\x1b[97m\\n" + RESET

LEVEL_TAGS = {
    LogLevel.TRACE: "[TRACE]",
    LogLevel.DEBUG: "[DEBUG]",
    LogLevel.INFO: " [INFO]",
    LogLevel.WARN: " [WARN]",
    LogLevel.ERROR: "[ERROR]",
    LogLevel.FATAL: "[FATAL]",
    LogLevel.PANIC: "[PANIC]",
}

LEVEL_COLORS = {
    LogLevel.TRACE: "\x1b[94m",
    LogLevel.DEBUG: "\x1b[92m",
    LogLevel.INFO: "\x1b[97m",
    LogLevel.WARN: "\x1b[93m",
    LogLevel.ERROR: "\x1b[91m",
    LogLevel.FATAL: "\x1b[91;5m",
    LogLevel.PANIC: "\x1b[91;5;7m",
}

LEVEL_TAGS_COLOR = {
    level: LEVEL_COLORS[level] + tag + RESET for level, tag in LEVEL_TAGS.items()
}


def level_tag(level: int, color: bool = False) -> str:
    """Return the 7-character severity tag, optionally wrapped in ANSI color.

    Values outside the enumeration render as '[L<n>]' without color.
    """
    table = LEVEL_TAGS_COLOR if color else LEVEL_TAGS
    tag = table.get(level)
    if tag is None:
        tag = f"[L{int(level)}]".rjust(7)
    return tag


def escape_newlines(message: str) -> str:
    return message.replace("\n", ESCAPED_NEWLINE)


def join_operands(values: tuple) -> str:
    """Concatenate operands, spacing two neighbours only when neither is a str."""
    parts = []
    prev_is_str = True
    for i, value in enumerate(values):
        is_str = isinstance(value, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(value if is_str else str(value))
        prev_is_str = is_str
    return "".join(parts)


def format_operands(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    return fmt % args


def render_line(tag: str, timestamp: str, banner: str, message: str) -> str:
    return f"{tag}{timestamp}{banner} {message}\n"

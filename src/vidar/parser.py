"""Line-oriented ``key=value`` property parser.

Each non-comment line must contain exactly one ``=``. Keys and values are
kept verbatim (no trimming, no quoting, no escapes). A comment is a line whose
first character is the comment leader; trailing comments are not recognised.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from vidar.exceptions import EnvFileIOError, InvalidPropertyError

PathLike = Union[str, Path]


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_lines(
    lines: Iterable[str],
    *,
    has_comments: bool = False,
    comment_char: str = "#",
    source: Optional[PathLike] = None,
) -> Dict[str, str]:
    """Decode property lines into a new dict.

    Args:
        lines: Lines to decode, with or without their ``\\n``/``\\r\\n`` endings
        has_comments: Skip lines starting with ``comment_char``
        comment_char: The comment leader
        source: Where the lines came from, reported on failure

    Returns:
        Mapping of key to value; a repeated key keeps its last value.

    Raises:
        InvalidPropertyError: A line does not split into exactly two fields.
    """
    props: Dict[str, str] = {}
    for line_number, raw in enumerate(lines, start=1):
        line = _strip_line_ending(raw)
        if has_comments and line.startswith(comment_char):
            continue

        fields = line.split("=")
        if len(fields) != 2:
            raise InvalidPropertyError(path=source, line_number=line_number)

        key, value = fields
        props[key] = value
    return props


def parse_file(
    path: PathLike,
    *,
    has_comments: bool = False,
    comment_char: str = "#",
) -> Dict[str, str]:
    """Read one properties file into a new dict.

    Raises:
        EnvFileIOError: The file could not be opened or read.
        InvalidPropertyError: A line is not a valid ``key=value`` pair.
    """
    path = Path(path)
    try:
        # newline="\n" keeps a lone "\r" inside the line it belongs to
        with open(path, encoding="utf-8", newline="\n") as f:
            return parse_lines(
                f,
                has_comments=has_comments,
                comment_char=comment_char,
                source=path,
            )
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileIOError(path, e) from e


__all__ = ["parse_file", "parse_lines"]

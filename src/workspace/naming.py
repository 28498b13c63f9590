from __future__ import annotations

import re

_DECAMELIZE_RE = re.compile(r"([a-z\d])([A-Z])")
_DASHERIZE_RE = re.compile(r"[ _]")
_CAMELIZE_RE = re.compile(r"(-|_|\.|\s)+(.)?")
_SEGMENT_RE = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


def decamelize(s: str) -> str:
    """'innerHTML' -> 'inner_html', 'myApp' -> 'my_app'."""
    return _DECAMELIZE_RE.sub(r"\1_\2", s or "").lower()


def dasherize(s: str) -> str:
    """'myApp' -> 'my-app', 'my app' -> 'my-app', 'my_app' -> 'my-app'."""
    return _DASHERIZE_RE.sub("-", decamelize(s))


def camelize(s: str) -> str:
    out = _CAMELIZE_RE.sub(lambda m: (m.group(2) or "").upper(), s or "")
    return out[:1].lower() + out[1:]


def capitalize(s: str) -> str:
    return (s or "")[:1].upper() + (s or "")[1:]


def classify(s: str) -> str:
    """'my-app' -> 'MyApp'; dotted parts are classified separately."""
    return ".".join(capitalize(camelize(part)) for part in (s or "").split("."))


def validate_path_segments(path: str) -> str:
    """Check every '/'-separated segment of an already dasherized path."""
    segments = path.split("/")
    for seg in segments:
        if not _SEGMENT_RE.match(seg):
            raise ValueError(
                f"invalid path segment {seg!r} in {path!r}; "
                "must match ^[a-z0-9][a-z0-9_-]*$"
            )
    return path


def split_tags(raw: str | None) -> list[str]:
    """Parse 'one, two,,three' into ['one', 'two', 'three'], keeping order."""
    if not raw:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]

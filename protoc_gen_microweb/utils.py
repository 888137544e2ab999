"""
Utility functions for Go identifier and path naming.

These follow the conventions of protoc-gen-go so that the names emitted by
this plugin line up with the types generated into the same Go package.
"""

import posixpath

GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)


def _is_ascii_lower(c: str) -> bool:
    return "a" <= c <= "z"


def go_camel_case(text: str) -> str:
    """Convert a protobuf name into an exported Go identifier.

    Examples:
        "hello_world" -> "HelloWorld"
        "HelloRequest" -> "HelloRequest"
        "Outer.Inner" -> "Outer_Inner"
        "_private" -> "XPrivate"
        "say_hello2" -> "SayHello2"

    Args:
        text: A proto identifier, possibly a dotted path of nested names

    Returns:
        The Go identifier protoc-gen-go would generate
    """
    out = []
    i = 0
    while i < len(text):
        c = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if c == "." and _is_ascii_lower(nxt):
            # ".{{lowercase}}" drops the dot
            pass
        elif c == ".":
            out.append("_")
        elif c == "_" and (i == 0 or text[i - 1] == "."):
            out.append("X")
        elif c == "_" and _is_ascii_lower(nxt):
            # "_{{lowercase}}" drops the underscore
            pass
        elif c.isdigit():
            out.append(c)
        else:
            out.append(c.upper() if _is_ascii_lower(c) else c)
            while i + 1 < len(text) and _is_ascii_lower(text[i + 1]):
                i += 1
                out.append(text[i])
        i += 1
    return "".join(out)


def go_sanitized(text: str) -> str:
    """Turn arbitrary text into a valid Go identifier.

    Invalid characters become underscores; keywords and identifiers that do
    not start with a letter get a leading underscore.
    """
    sanitized = "".join(c if c.isalnum() or c == "_" else "_" for c in text)
    if not sanitized or sanitized in GO_KEYWORDS or not sanitized[0].isalpha():
        return "_" + sanitized
    return sanitized


def go_package_name(import_path: str) -> str:
    """Derive a Go package name from the last segment of an import path."""
    return go_sanitized(posixpath.basename(import_path.rstrip("/")))


def replace_extension(path: str, extension: str) -> str:
    """Replace the extension of a slash separated path.

    Examples:
        "greeter/greeter.proto", ".web.go" -> "greeter/greeter.web.go"
        "noext", ".web.go" -> "noext.web.go"
    """
    root, _ = posixpath.splitext(path)
    return root + extension

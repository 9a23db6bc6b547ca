import os.path
import shutil
from pathlib import Path


def create_dir(path: str, delete: bool = False):
    if not os.path.exists(path) or not delete:
        os.makedirs(path, exist_ok=True)
    else:
        shutil.rmtree(path)
        os.mkdir(path)


def get_fullname(path: str) -> str:
    p = Path(path)
    p.resolve()
    return str(p.expanduser())


def get_filename(path: str) -> str:
    return Path(path).expanduser().name


def read_file(path: str) -> str:
    with open(get_fullname(path), "r", 1024, encoding="utf-8-sig") as f:
        return f.read()


def write_file(path: str, text: str):
    parent = os.path.dirname(get_fullname(path))
    if parent:
        create_dir(parent)
    with open(get_fullname(path), "w", 1024, encoding="utf8") as f:
        f.write(text)
        f.flush()


def is_comment_line(line: str) -> bool:
    line = line.strip()
    return (line.startswith("#") or line.startswith("--")
            or (line.startswith("/*") and (line.endswith("*/;") or line.endswith("*/"))))


def clean_script(dirty: str) -> str:
    """
    drops a leading byte order mark, blank lines, # and -- comments and /* ... */; lines (mysqldump headers)
    """
    dirty = dirty.removeprefix("\ufeff")
    lines = [line for line in dirty.splitlines() if line.strip() != "" and not is_comment_line(line)]
    return "\n".join(lines)


def strip_leading_comments(statement: str) -> str:
    """
    drops /* ... */ comments in front of a statement
    """
    statement = statement.lstrip()
    while statement.startswith("/*"):
        end = statement.find("*/")
        if end < 0:
            break
        statement = statement[end + 2:].lstrip()
    return statement


def split_statements(script: str) -> list[str]:
    """
    splits on ; outside of quoted strings and backtick identifiers
    """
    statements: list[str] = []
    current: list[str] = []
    quote = None
    index = 0
    while index < len(script):
        c = script[index]
        current.append(c)
        if quote is not None:
            if c == "\\" and quote != "`" and index + 1 < len(script):
                current.append(script[index + 1])
                index += 1
            elif c == quote:
                quote = None
        elif c in "'\"`":
            quote = c
        elif c == ";":
            current.pop()
            statements.append("".join(current))
            current = []
        index += 1

    statements.append("".join(current))
    return [statement.strip() for statement in statements if statement.strip() != ""]

"""
Build variable expansion for URL templates.

與 build host 相同的 macro 語法：
    ${NAME}   braced 形式（NAME 可含 '.'）
    $NAME     bare 形式（字母、數字、底線）
    $$        跳脫為單一 '$'

找不到的變數原樣保留（不視為錯誤）。
替換後的值不會再次展開。
"""
from __future__ import annotations

import re

from cnf.core.types import EnvironmentContext

_MACRO_RE = re.compile(r"\$([A-Za-z0-9_]+|\{[A-Za-z0-9_.]+\}|\$)")


def expand(template: str, env: EnvironmentContext) -> str:
    """
    Substitute build variable references in ``template``.

    Args:
        template: String containing ``${NAME}`` / ``$NAME`` references
        env: Build variables

    Returns:
        str: Expanded string; unresolved references are left untouched
    """
    if "$" not in template:
        return template

    def _resolve(match: re.Match[str]) -> str:
        key = match.group(1)
        if key == "$":
            return "$"
        if key.startswith("{"):
            key = key[1:-1]
        value = env.get(key)
        return match.group(0) if value is None else value

    return _MACRO_RE.sub(_resolve, template)

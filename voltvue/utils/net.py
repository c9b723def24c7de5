"""网络工具 - 仓库地址安全校验"""

from __future__ import annotations

from urllib.parse import urlparse

from voltvue.core.exceptions import ValidationError

_ALLOWED_SCHEMES = frozenset(("http", "https", "ssh", "git", "file"))


def validate_url_scheme(url: str, *, context: str = "") -> None:
    """校验仓库 URL 协议，防止 ext:: 等可执行任意命令的 git 传输方式

    Raises:
        ValidationError: URL scheme 不在白名单内
    """
    parsed = urlparse(url)
    if parsed.scheme not in _ALLOWED_SCHEMES:
        label = f" ({context})" if context else ""
        raise ValidationError(
            f"不允许的 URL 协议 '{parsed.scheme}'{label}，"
            f"仅支持 {'/'.join(sorted(_ALLOWED_SCHEMES))}: {url}"
        )

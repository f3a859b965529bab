import re

_BRACKET_RE = re.compile(r"[【】]")
_WS_RE = re.compile(r"\s+")


def normalize_header(text: str) -> str:
    """競合見出しを比較・集計用のキーに正規化する。

    全角括弧【】と空白（全角スペース・改行を含む）を取り除く。大文字小文字は区別したまま。
    """
    text = _BRACKET_RE.sub("", text)
    text = _WS_RE.sub("", text)
    return text.strip()

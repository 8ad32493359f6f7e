"""Utility for generating Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a Markdown code block around code, inserted verbatim."""
    return f"```{lang}\n{code}\n```"

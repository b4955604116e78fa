"""LaTeX letter markup to HTML.

Only the small command set the sample templates use is understood. Rules run
in order over the whole text; anything they don't match is left as-is.
"""
from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from jinja2 import Template

# (pattern, replacement, count) where count=0 means every occurrence
Rule = Tuple[Pattern[str], str, int]

LATEX_RULES: List[Rule] = [
    # document structure
    (re.compile(r"\\documentclass.*\n"), "", 1),
    (re.compile(r"\\usepackage.*\n"), "", 0),
    (re.compile(r"\\geometry.*\n"), "", 0),
    (re.compile(r"\\begin\{document\}"), "", 1),
    (re.compile(r"\\end\{document\}"), "", 1),
    # letter
    (re.compile(r"\\begin\{letter\}\{([^}]+)\}"), r'<div class="letter-header">\1</div>', 1),
    (re.compile(r"\\end\{letter\}"), "", 1),
    (re.compile(r"\\opening\{([^}]+)\}"), r'<div class="opening">\1</div>', 1),
    (re.compile(r"\\closing\{([^}]+)\}"), r'<div class="closing">\1</div>', 1),
    (re.compile(r"\\signature\{([^}]+)\}"), r'<div class="signature">\1</div>', 1),
    # lists
    (re.compile(r"\\begin\{itemize\}"), "<ul>", 0),
    (re.compile(r"\\end\{itemize\}"), "</ul>", 0),
    (re.compile(r"\\item\s+"), "<li>", 0),
    # breaks
    (re.compile(r"\\\\"), "<br>", 0),
    (re.compile(r"\n\s*\n"), "</p><p>", 0),
]

DOCUMENT_TEMPLATE = Template(
    """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Cover Letter</title>
    <style>
        body {
            font-family: 'Times New Roman', serif;
            line-height: 1.6;
            max-width: 8.5in;
            margin: 0 auto;
            padding: 1in;
            color: #333;
        }
        .letter-header {
            margin-bottom: 2em;
            white-space: pre-line;
        }
        .opening {
            margin-bottom: 1em;
        }
        .closing {
            margin-top: 2em;
            margin-bottom: 1em;
        }
        .signature {
            margin-top: 3em;
        }
        p {
            margin-bottom: 1em;
        }
        ul {
            margin: 1em 0;
            padding-left: 2em;
        }
        li {
            margin-bottom: 0.5em;
        }
    </style>
</head>
<body>
    <p>{{ body }}</p>
</body>
</html>"""
)


def wrap_document(body: str) -> str:
    """Place already-converted HTML inside the fixed page shell."""
    return DOCUMENT_TEMPLATE.render(body=body)


def latex_to_html(latex: str) -> str:
    html = latex
    for pattern, replacement, count in LATEX_RULES:
        html = pattern.sub(replacement, html, count=count)
    return wrap_document(html)

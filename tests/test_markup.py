from coverletter.markup import latex_to_html, wrap_document


def test_plain_text_is_only_wrapped():
    text = "Just a sentence with no commands.\nAnd a second line."
    assert latex_to_html(text) == wrap_document(text)


def test_shell_has_head_and_body():
    html = wrap_document("hello")
    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert "<title>Cover Letter</title>" in html
    assert "font-family: 'Times New Roman', serif;" in html
    assert "<p>hello</p>" in html
    assert html.rstrip().endswith("</html>")


def test_document_structure_is_removed():
    latex = (
        "\\documentclass[11pt]{letter}\n"
        "\\usepackage[utf8]{inputenc}\n"
        "\\usepackage{geometry}\n"
        "\\geometry{a4paper, margin=1in}\n"
        "\\begin{document}\n"
        "Body text\n"
        "\\end{document}\n"
    )
    html = latex_to_html(latex)
    for command in ("\\documentclass", "\\usepackage", "\\geometry", "\\begin{document}", "\\end{document}"):
        assert command not in html
    assert "Body text" in html


def test_single_opening_block():
    html = latex_to_html("\\opening{Dear Ms. Rivera,}\nThanks for reading.")
    assert html.count('class="opening"') == 1
    assert '<div class="opening">Dear Ms. Rivera,</div>' in html


def test_letter_blocks():
    latex = (
        "\\begin{letter}{Hiring Team \\\\ Acme Corp}\n"
        "\\opening{Hello,}\n"
        "\\closing{Sincerely,}\n"
        "\\signature{Sam Lee}\n"
        "\\end{letter}"
    )
    html = latex_to_html(latex)
    assert '<div class="letter-header">Hiring Team <br> Acme Corp</div>' in html
    assert '<div class="closing">Sincerely,</div>' in html
    assert '<div class="signature">Sam Lee</div>' in html
    assert "\\end{letter}" not in html


def test_itemize_becomes_list_in_order():
    latex = (
        "\\begin{itemize}\n"
        "\\item First point\n"
        "\\item Second point\n"
        "\\item Third point\n"
        "\\end{itemize}"
    )
    html = latex_to_html(latex)
    assert html.count("<ul>") == 1
    assert html.count("</ul>") == 1
    assert html.count("<li>") == 3
    first = html.index("<li>First point")
    second = html.index("<li>Second point")
    third = html.index("<li>Third point")
    assert html.index("<ul>") < first < second < third < html.index("</ul>")


def test_blank_lines_split_paragraphs():
    html = latex_to_html("One paragraph.\n\n  \nAnother paragraph.")
    assert "One paragraph.</p><p>Another paragraph." in html


def test_unknown_commands_pass_through():
    html = latex_to_html("\\textbf{Bold claim} stays literal")
    assert "\\textbf{Bold claim} stays literal" in html


def test_second_pass_is_not_idempotent():
    # structural commands are consumed by the first pass; a second pass
    # only nests another shell around the first result
    first = latex_to_html("\\opening{Hi,}\nText")
    second = latex_to_html(first)
    assert second != first
    assert second.count("<!DOCTYPE html>") == 2

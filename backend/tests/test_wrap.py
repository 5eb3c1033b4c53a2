from tailorpdf.layout import text_width, wrap_text


def char_width(text, font, size):
    return len(text) * size


def test_greedy_wrap_with_fixed_width_measure():
    lines = wrap_text("aa bb cc dd", "any", 1, 5, measure=char_width)
    assert lines == ["aa bb", "cc dd"]


def test_oversized_word_gets_its_own_line():
    lines = wrap_text("a supercalifragilistic b", "any", 1, 5, measure=char_width)
    assert lines == ["a", "supercalifragilistic", "b"]


def test_empty_text_has_no_lines():
    assert wrap_text("", "Helvetica", 11, 100) == []
    assert wrap_text("   ", "Helvetica", 11, 100) == []


def test_lines_fit_and_words_are_preserved():
    text = ("Led migration of legacy SaaS products into cloud-native microservices "
            "enhanced with AI-powered copilots,   reducing operational costs by 25%\tand "
            "boosting platform uptime by 21%.")
    max_width = 180
    lines = wrap_text(text, "Helvetica", 11, max_width)
    assert len(lines) > 1
    for line in lines:
        assert text_width(line, "Helvetica", 11) <= max_width or " " not in line
    assert " ".join(lines) == " ".join(text.split())


def test_bold_measures_wider_than_regular():
    assert text_width("Resume", "Helvetica-Bold", 11) > text_width("Resume", "Helvetica", 11)

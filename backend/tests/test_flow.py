from tailorpdf.layout import (
    Blank, FontPair, HeaderInfo, JobEntry, PageFlowEngine, PlainText, SectionHeader,
    SkillsCategory, split_emphasis,
)
from tailorpdf.layout.emphasis import Run, place_runs
from tailorpdf.layout.measure import text_width
from tailorpdf.layout.styles import A4


def test_header_draws_upper_name_contact_and_rule(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.draw_header(HeaderInfo(headline="Engineer", name="Louis Bailey", email="l@b.io",
                                  phone="555", location="Austin", link="site.dev"))
    texts = [s[3] for s in fake_canvas.strings]
    assert texts == ["LOUIS BAILEY", "Austin • 555 • l@b.io • site.dev"]
    assert fake_canvas.strings[0][2] == A4.top
    assert len(fake_canvas.lines) == 1
    assert "Engineer" not in texts


def test_header_tolerates_missing_fields(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.draw_header(HeaderInfo())
    assert fake_canvas.strings == []
    assert len(fake_canvas.lines) == 1
    assert engine.cursor.y < A4.top


def test_job_entry_formats_period_and_uses_styles(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.flow([JobEntry(title="Senior Engineer", company="Acme Corp", period="06/2022 - Current")])
    drawn = [(s[3], s[4], s[5]) for s in fake_canvas.strings]
    assert drawn == [
        ("Senior Engineer", "Helvetica-Bold", 12),
        ("Acme Corp", "Helvetica", 11),
        ("Jun 2022 – Current", "Helvetica", 10),
    ]
    assert all(s[1] == A4.margin_left + 10 for s in fake_canvas.strings)


def test_section_and_skills_category(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.flow([SectionHeader(text="Skills:"), Blank(), SkillsCategory(name="Frontend")])
    header, category = fake_canvas.strings
    assert header[3:] == ("Skills:", "Helvetica-Bold", 14)
    assert header[1] == A4.margin_left
    assert category[3:] == ("Frontend", "Helvetica-Bold", 12)
    assert header[2] > category[2]


def test_plain_text_bold_runs_advance_by_measured_width(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.flow([PlainText(text="Built **FastAPI** services")])
    runs = [(s[1], s[3], s[4]) for s in fake_canvas.strings]
    x0 = A4.margin_left + 10
    x1 = x0 + text_width("Built ", "Helvetica", 11)
    x2 = x1 + text_width("FastAPI", "Helvetica-Bold", 11)
    assert runs == [
        (x0, "Built ", "Helvetica"),
        (x1, "FastAPI", "Helvetica-Bold"),
        (x2, " services", "Helvetica"),
    ]
    assert len({s[2] for s in fake_canvas.strings}) == 1


def test_split_emphasis():
    assert split_emphasis("a **b** c **d**") == [Run("a "), Run("b", True), Run(" c "), Run("d", True)]
    assert split_emphasis("no markers") == [Run("no markers")]
    assert split_emphasis("**") == [Run("**")]


def test_place_runs_custom_fonts():
    fonts = FontPair()
    placed = place_runs("**X**Y", 0, 10, fonts.regular, fonts.bold)
    assert [p.font for p in placed] == ["Helvetica-Bold", "Helvetica"]
    assert placed[1].x == text_width("X", "Helvetica-Bold", 10)


def test_long_content_paginates_without_drawing_below_margin(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.draw_header(HeaderInfo(name="Louis Bailey", email="l@b.io"))
    body = []
    for i in range(12):
        body += [Blank(), SectionHeader(text=f"Section {i}:"),
                 JobEntry(title="Engineer", company=f"Company {i}", period="01/2020 - 02/2021")]
        body += [PlainText(text="• Delivered **measurable** results " * 6) for _ in range(4)]
    engine.flow(body)

    assert fake_canvas.pages > 1
    assert engine.pages_used > 1
    assert all(s[2] >= A4.margin_bottom for s in fake_canvas.strings)
    assert all(d.y >= A4.margin_bottom for d in engine.drawn)
    assert all(s[2] <= A4.top for s in fake_canvas.strings)
    # every page after the first starts at the top margin
    for page in range(2, engine.pages_used + 1):
        ys = [d.y for d in engine.drawn if d.page == page]
        assert max(ys) <= A4.top


def test_cursor_moves_down_within_a_page(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.flow([PlainText(text=f"line {i}") for i in range(10)])
    ys = [s[2] for s in fake_canvas.strings]
    assert ys == sorted(ys, reverse=True)
    assert len(set(ys)) == 10


def test_pre_gap_near_bottom_margin_moves_header_to_next_page(fake_canvas):
    engine = PageFlowEngine(fake_canvas)
    engine.cursor.y = A4.margin_bottom + 5
    engine.flow([SectionHeader(text="Experience:")])

    assert fake_canvas.pages == 2
    assert fake_canvas.strings == [(2, A4.margin_left, A4.top, "Experience:", "Helvetica-Bold", 14)]
    assert engine.drawn[0].page == 2

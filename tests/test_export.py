import csv
import io

from leadgen_assets.export import outreach_csv, write_outreach_csv
from leadgen_assets.generator import generate_assets
from leadgen_assets.models import OutreachRow


def _row(**overrides):
    fields = dict(
        company="Acme Solar",
        contact_name="Jordan Reyes",
        title="Owner",
        email="jordan.reyes@example.com",
        personalized_intro="Hi Jordan",
        email_variant="Subject: hello",
        cta="Call?",
    )
    fields.update(overrides)
    return OutreachRow(**fields)


def test_header_row():
    text = outreach_csv([_row()])
    assert text.split("\n")[0] == (
        '"company","contact_name","title","email","personalized_intro","email_variant","cta"'
    )


def test_quotes_are_doubled():
    text = outreach_csv([_row(company='A "B"')])
    assert text.split("\n")[1].startswith('"A ""B""",')


def test_commas_and_newlines_survive(acme_profile):
    rows = generate_assets(acme_profile).personalized
    parsed = list(csv.reader(io.StringIO(outreach_csv(rows))))
    assert len(parsed) == len(rows) + 1
    assert parsed[1][0] == rows[0].company
    assert parsed[1][5] == rows[0].email_variant
    assert "\n" in parsed[1][5]


def test_write_outreach_csv(tmp_path):
    path = write_outreach_csv([_row(), _row(company="Beta, Inc.")], tmp_path / "out.csv")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[2][0] == "Beta, Inc."

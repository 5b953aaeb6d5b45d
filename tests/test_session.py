# ==============================================
# Tests for CellSession
# ==============================================
#
# The shell is driven through injected prompt/echo callables.
# ==============================================

import pytest

from cellstats.normalization import CELL_FIELDS
from cellstats.session import ADD_QUESTIONS, CellSession


class ScriptedPrompt:
    """Answers prompts from a list; EOFError once it runs out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, question):
        self.questions.append(question)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def output():
    return []


@pytest.fixture
def make_session(config, store, output):
    def _make(answers=()):
        return CellSession(config, store, prompt=ScriptedPrompt(answers), echo=output.append)
    return _make


# ==============================================
# Operations
# ==============================================

class TestOperations:

    def test_load(self, make_session, csv_file, sample_row, config):
        csv_file([sample_row, sample_row])
        session = make_session()

        assert session.load() == 2
        assert len(session.store) == 2

    def test_load_explicit_path(self, make_session, csv_file, sample_row):
        path = csv_file([sample_row], name="other.csv")
        assert make_session().load(str(path)) == 1

    def test_add_normalizes(self, make_session, sample_row):
        session = make_session()
        key = session.add(dict(sample_row, body_weight="99 g"))

        assert key == 1
        assert session.store.get(key).body_weight == 99.0

    def test_delete(self, make_session, sample_row):
        session = make_session()
        key = session.add(sample_row)

        assert session.delete(key) is True
        assert session.delete(key) is False

    def test_update(self, make_session, sample_row):
        session = make_session()
        key = session.add(sample_row)

        assert session.update(key, "oem", "Apple")
        assert session.store.get(key).oem == "Apple"

    def test_list_unique_values(self, make_session, sample_row):
        session = make_session()
        session.add(sample_row)
        session.add(dict(sample_row, oem="Apple"))

        assert session.list_unique_values()["oem"] == {"Samsung", "Apple"}

    def test_report(self, make_session, sample_row):
        session = make_session()
        session.add(sample_row)

        report = session.report()
        assert report.heaviest_oem == ("Samsung", 157.0)
        assert report.top_launch_year == (2019, 1)

    def test_print_report(self, make_session, sample_row, output):
        session = make_session()
        session.add(sample_row)
        session.print_report()

        assert output[0] == "=" * 60
        assert output[-1] == "=" * 60
        assert len(output) == 6

    def test_separate_sessions_do_not_share_state(self, config, sample_row):
        first = CellSession(config)
        second = CellSession(config)
        first.add(sample_row)

        assert len(first.store) == 1
        assert len(second.store) == 0


# ==============================================
# Interactive shell
# ==============================================

class TestShell:

    def test_exit(self, make_session, output):
        make_session(["exit"]).run_shell()
        assert output == []

    def test_end_of_input_stops(self, make_session):
        make_session([]).run_shell()

    def test_invalid_option(self, make_session, output):
        make_session(["dance", "EXIT"]).run_shell()
        assert output == ["Invalid option"]

    def test_add(self, make_session, store, output, sample_row):
        answers = ["add"] + [sample_row[name] for name in ADD_QUESTIONS] + ["exit"]
        make_session(answers).run_shell()

        assert len(store) == 1
        assert store.get(1).oem == "Samsung"
        assert output[0].startswith("New cell added at index 1")

    def test_add_asks_every_field(self, make_session):
        session = make_session(["add"] + ["-"] * 12 + ["exit"])
        session.run_shell()

        asked = session._prompt.questions[1:13]
        assert asked == list(ADD_QUESTIONS.values())
        assert tuple(ADD_QUESTIONS) == CELL_FIELDS
        assert all(value is None for value in session.store.get(1).to_dict().values())

    def test_add_interrupted_leaves_store_untouched(self, make_session, store):
        make_session(["add", "Nokia", "3310"]).run_shell()
        assert len(store) == 0

    def test_delete(self, make_session, store, output, make_cell):
        store.insert(make_cell())
        make_session(["delete", "1", "delete", "1", "exit"]).run_shell()

        assert len(store) == 0
        assert output == ["Cell at index 1 has been deleted.", "No cell found at that index."]

    def test_delete_non_integer(self, make_session, output):
        make_session(["delete", "one", "exit"]).run_shell()
        assert output == ["'one' is not a valid index."]

    def test_update(self, make_session, store, output, make_cell):
        store.insert(make_cell())
        make_session(["update", "1", "body_weight", "120 g", "exit"]).run_shell()

        assert store.get(1).body_weight == 120.0
        assert output[0].startswith("Cell at index 1 updated")

    def test_update_unknown_field(self, make_session, store, output, make_cell):
        store.insert(make_cell())
        make_session(["update", "1", "price", "10", "exit"]).run_shell()

        assert output == ["Unknown cell field 'price'"]

    def test_update_missing_key(self, make_session, output):
        make_session(["update", "5", "oem", "Nokia", "exit"]).run_shell()
        assert output == ["No cell found at that index."]

    def test_list(self, make_session, store, output, make_cell):
        store.insert(make_cell(oem="Nokia"))
        make_session([" list ", "exit"]).run_shell()

        assert len(output) == len(CELL_FIELDS)
        assert output[0] == "oem: Nokia"

    def test_report(self, make_session, store, output, make_cell):
        store.insert(make_cell())
        make_session(["report", "exit"]).run_shell()

        assert "Samsung" in output[1]

from unittest.mock import MagicMock, patch

from billed.cli.new_bill_menu import new_bill_menu
from billed.constants import ROUTES_PATH
from billed.exceptions import StoreError
from billed.models.user import User
from billed.services.new_bill_service import NewBillService, NewBillState
from billed.session import StaticSession
from tests.conftest import FakeStore


def _answers(mock_q, *, texts, receipt_paths, bill_type="Transports", confirm=False):
    mock_q.select.return_value.ask.return_value = bill_type
    mock_q.text.return_value.ask.side_effect = texts
    mock_q.path.return_value.ask.side_effect = receipt_paths
    mock_q.confirm.return_value.ask.return_value = confirm


# name, date, amount, vat, pct, commentary
FORM_TEXTS = ["Taxi", "2021-09-01", "30", "10", "20", "aéroport"]


class TestNewBillMenu:
    def setup_method(self):
        self.store = FakeStore()
        self.navigate = MagicMock()
        self.service = NewBillService(self.store, self.navigate, StaticSession(User(email="a@a")))

    @patch("billed.cli.new_bill_menu.console")
    @patch("billed.cli.new_bill_menu.questionary")
    def test_submits_bill(self, mock_q, _console, tmp_path):
        receipt = tmp_path / "ticket.png"
        receipt.write_bytes(b"png")
        _answers(mock_q, texts=FORM_TEXTS, receipt_paths=[str(receipt)])

        new_bill_menu(self.service)

        assert self.service.state == NewBillState.SUBMITTED
        data = self.store.resource.updated[0].data
        assert data.name == "Taxi"
        assert data.amount == 30
        assert data.file_name == "ticket.png"
        self.navigate.assert_called_once_with(ROUTES_PATH["Bills"])

    @patch("billed.cli.new_bill_menu.console")
    @patch("billed.cli.new_bill_menu.questionary")
    def test_invalid_receipt_prompts_again(self, mock_q, mock_console, tmp_path):
        bad = tmp_path / "notes.txt"
        bad.write_bytes(b"txt")
        good = tmp_path / "ticket.jpg"
        good.write_bytes(b"jpg")
        _answers(mock_q, texts=FORM_TEXTS, receipt_paths=[str(bad), str(good)])

        new_bill_menu(self.service)

        assert [p.file.name for p in self.store.resource.created] == ["ticket.jpg"]
        assert self.service.state == NewBillState.SUBMITTED
        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "jpg, jpeg et png" in printed

    @patch("billed.cli.new_bill_menu.console")
    @patch("billed.cli.new_bill_menu.questionary")
    def test_abort_receipt_goes_back(self, mock_q, _console):
        _answers(mock_q, texts=FORM_TEXTS, receipt_paths=[None])

        new_bill_menu(self.service)

        assert self.store.resource.updated == []
        self.navigate.assert_called_once_with(ROUTES_PATH["Bills"])

    @patch("billed.cli.new_bill_menu.console")
    @patch("billed.cli.new_bill_menu.questionary")
    def test_store_failure_then_give_up(self, mock_q, mock_console, tmp_path):
        receipt = tmp_path / "ticket.png"
        receipt.write_bytes(b"png")
        _answers(mock_q, texts=FORM_TEXTS, receipt_paths=[str(receipt)], confirm=False)
        self.store.resource.update_error = StoreError("Erreur 500")

        new_bill_menu(self.service)

        assert self.service.state == NewBillState.EDITING
        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "Erreur 500" in printed
        self.navigate.assert_called_once_with(ROUTES_PATH["Bills"])

"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from ordersvc.infrastructure.cli.main import cli
from tests.fakes import FakeOrderRepository


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("ORDERSVC_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ORDERSVC_INVENTORY_URL", "")
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--log-level", "ERROR", *args])

    return _run


def _orders(tmp_path):
    path = tmp_path / "orders.json"
    return json.loads(path.read_text()) if path.exists() else []


class TestProductCommands:

    def test_add_and_list(self, run):
        result = run("product", "add", "--name", "Desk Mat", "--price", "20.00", "--quantity", "60")
        assert result.exit_code == 0, result.output
        assert "Product #1 'Desk Mat' added at $20.00" in result.output

        result = run("product", "list")
        assert "Desk Mat" in result.output

    def test_seed_then_show(self, run):
        assert "Seeded 10 products." in run("product", "seed").output
        result = run("product", "show", "--id", "2")
        assert "Wireless Mouse" in result.output

    def test_update_and_delete(self, run):
        run("product", "seed")
        result = run(
            "product", "update", "--id", "1", "--name", "Laptop Air",
            "--price", "999.00", "--quantity", "4",
        )
        assert result.exit_code == 0, result.output
        assert "Laptop Air" in result.output

        assert run("product", "delete", "--id", "1").exit_code == 0
        result = run("product", "show", "--id", "1")
        assert result.exit_code != 0
        assert "Product not found with id: 1" in result.output


class TestOrderCommands:

    def test_create_order_against_catalog(self, run, tmp_path):
        run("product", "seed")
        result = run("order", "create", "--user", "alice", "--items", "2:2,5:1")

        assert result.exit_code == 0, result.output
        assert "status=VALIDATED" in result.output
        assert "$95.00" in result.output
        orders = _orders(tmp_path)
        assert len(orders) == 1
        assert orders[0]["total_amount"] == "95.00"

    def test_insufficient_stock_reports_and_saves_nothing(self, run, tmp_path):
        run("product", "seed")
        result = run("order", "create", "--user", "alice", "--items", "2:2,4:100")

        assert result.exit_code == 1
        assert "Insufficient stock for product 'Monitor 4K'. Available: 15, Requested: 100" in result.output
        assert _orders(tmp_path) == []

    def test_unknown_product(self, run):
        run("product", "seed")
        result = run("order", "create", "--user", "alice", "--items", "99:1")
        assert result.exit_code == 1
        assert "Product not found with id: 99" in result.output

    def test_bad_item_format(self, run):
        result = run("order", "create", "--user", "alice", "--items", "2-2")
        assert result.exit_code == 2
        assert "Expected 'ProductId:Quantity'" in result.output

    def test_zero_quantity_rejected_before_core(self, run):
        result = run("order", "create", "--user", "alice", "--items", "2:0")
        assert result.exit_code == 2
        assert "at least 1" in result.output

    def test_list_and_show(self, run, tmp_path):
        run("product", "seed")
        run("order", "create", "--user", "alice", "--items", "1:1")
        run("order", "create", "--user", "bob", "--items", "3:2")

        result = run("order", "list", "--user", "bob")
        assert "bob" in result.output
        assert "alice" not in result.output

        order_id = _orders(tmp_path)[0]["id"]
        result = run("order", "show", "--id", order_id)
        assert result.exit_code == 0
        assert "$1500.00" in result.output

    def test_show_missing_order(self, run):
        result = run("order", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "Order #nope not found" in result.output

    def test_list_empty(self, run):
        assert "No orders found." in run("order", "list").output

    def test_seed_orders(self, run, tmp_path):
        run("product", "seed")
        result = run("order", "seed", "--count", "3")
        assert result.exit_code == 0, result.output
        assert len(_orders(tmp_path)) == int(result.output.split()[1])

    def test_seed_orders_reports_failed_commit(self, run, monkeypatch):
        run("product", "seed")
        monkeypatch.setattr(
            "ordersvc.infrastructure.cli.order_commands.order_repository",
            lambda: FakeOrderRepository(fail_on_save=True),
        )
        result = run("order", "seed", "--count", "2")

        assert result.exit_code == 1
        assert "Error: disk full" in result.output
        assert "Traceback" not in result.output

# tests/test_main.py
from storefront.main import build_order_store, build_parser
from storefront.persistence import MemoryOrderLog, OrderLog


def test_default_store_is_the_order_log(tmp_path):
    args = build_parser().parse_args(["--order-log", str(tmp_path / "orders.log")])

    store = build_order_store(args)

    assert isinstance(store, OrderLog)
    assert store.path == tmp_path / "orders.log"


def test_in_memory_flag_selects_memory_store():
    args = build_parser().parse_args(["--in-memory"])

    assert isinstance(build_order_store(args), MemoryOrderLog)

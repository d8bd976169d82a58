import sys

import pytest

from coffeesim.payment import PaymentModel

DBL_MAX = sys.float_info.max
DBL_MIN = sys.float_info.min


def _spy(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_new_model_is_empty():
    model = PaymentModel()
    assert model.balance == 0.0
    assert model.revenue == 0.0


@pytest.mark.parametrize(
    "initial, amount, expected",
    [
        (0.0, 0.0, 0.0),
        (0.0, 100.0, 100.0),
        (0.0, -50.0, -50.0),
        (50.0, 75.0, 125.0),
        (50.0, -25.0, 25.0),
        (0.0, 1e9, 1e9),
        (0.0, -1e9, -1e9),
        (0.0, 1e-10, 1e-10),
        (0.0, -1e-10, -1e-10),
        (0.0, DBL_MAX, DBL_MAX),
        (0.0, DBL_MIN, DBL_MIN),
    ],
)
def test_add_balance(initial, amount, expected):
    model = PaymentModel()
    if initial != 0.0:
        model.add_balance(initial)
    spy = _spy(model.balance_updated)
    model.add_balance(amount)
    assert model.balance + 1 == pytest.approx(expected + 1)
    assert len(spy) == 1
    assert spy[0][0] + 1 == pytest.approx(expected + 1)


@pytest.mark.parametrize(
    "initial, payment, result, balance, revenue, signal",
    [
        (200.0, 100.0, True, 100.0, 100.0, "processed"),
        (100.0, 100.0, True, 0.0, 100.0, "processed"),
        (50.0, 100.0, False, 50.0, 0.0, "failed"),
        (50.0, 0.0, True, 50.0, 0.0, "processed"),
        (100.0, -20.0, True, 120.0, -20.0, "processed"),
        (1e9, DBL_MAX, False, 1e9, 0.0, "failed"),
    ],
)
def test_process_payment(initial, payment, result, balance, revenue, signal):
    model = PaymentModel()
    if initial != 0.0:
        model.add_balance(initial)
    spy_balance = _spy(model.balance_updated)
    spy_processed = _spy(model.payment_processed)
    spy_failed = _spy(model.payment_failed)

    assert model.process_payment(payment) is result
    assert model.balance + 1 == pytest.approx(balance + 1)
    assert model.revenue + 1 == pytest.approx(revenue + 1)

    if signal == "processed":
        assert spy_processed == [(payment,)]
        assert len(spy_balance) >= 1
        assert spy_failed == []
    else:
        assert spy_failed == [(payment,)]
        assert spy_processed == []
        assert spy_balance == []


def test_balance_plus_revenue_is_preserved_by_payments():
    model = PaymentModel()
    model.add_balance(30.0)
    total = model.balance + model.revenue
    model.process_payment(5.0)
    model.process_payment(6.0)
    model.process_payment(100.0)
    assert model.balance + model.revenue == pytest.approx(total)
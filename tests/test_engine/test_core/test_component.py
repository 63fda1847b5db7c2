import pytest
from pydantic import ValidationError
from heroes_engine.core.component import Component

class Wallet(Component):
    diamonds: int = 0
    tickets: int = 0

def test_validate_assignment():
    wallet = Wallet()
    with pytest.raises(ValidationError):
        wallet.diamonds = "lots"

def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        Wallet(diamonds=1, gold=5)

def test_clone_is_deep():
    class Bag(Component):
        items: list[str] = []

    bag = Bag(items=["potion"])
    copy = bag.clone()
    copy.items.append("ether")

    assert bag.items == ["potion"]

def test_json_round_trip():
    wallet = Wallet(diamonds=10, tickets=2)
    assert Wallet.model_validate_json(wallet.model_dump_json()) == wallet

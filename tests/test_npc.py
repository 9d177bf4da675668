from jmart.npc import Npc


def test_defaults():
    npc = Npc()
    assert npc.name == ""
    assert npc.role == ""
    assert npc.dialogue == [""] * 6


def test_name_and_role_round_trip():
    npc = Npc(name="Bob", role="cashier")
    assert (npc.name, npc.role) == ("Bob", "cashier")


def test_dialogue_not_shared():
    a = Npc()
    b = Npc()
    a.dialogue[0] = "hi"
    assert b.dialogue[0] == ""


def test_cashier_lines():
    npc = Npc()
    assert npc.cashier_welcome() == "Welcome to J Mart"
    assert npc.cashier_leave() == "Thank you for shopping at J Mart"


def test_customer_and_security_lines():
    npc = Npc()
    assert npc.customer_speech() == "Hello"
    assert npc.security_speech() == "What ya looking at?"
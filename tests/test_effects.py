from pokedex.data.effects import Effect, EffectKind, parse_stat_boost, resolve_effect
from pokedex.data.stats import Stat


def test_text_scan_order():
    assert parse_stat_boost("+10 HP EVs") == Effect(EffectKind.STAT_BOOST, Stat.HP, 10)
    assert parse_stat_boost("+1 Speed EV") == Effect(EffectKind.STAT_BOOST, Stat.SPEED, 1)
    # "Special Defense EV" contains "Defense EV"
    assert parse_stat_boost("+10 Special Defense EVs") == Effect(EffectKind.STAT_BOOST, Stat.DEFENSE, 10)


def test_unrecognised_text_has_no_stat():
    eff = parse_stat_boost("Tastes nice")
    assert eff.kind is EffectKind.STAT_BOOST
    assert eff.stat is None
    assert eff.describe() == "no effect"


def test_explicit_boost_wins():
    eff = resolve_effect("Vitamin", "+10 HP EVs", {"stat": "speed", "amount": 5})
    assert eff == Effect(EffectKind.STAT_BOOST, Stat.SPEED, 5)


def test_category_dispatch():
    assert resolve_effect("Leveling Item").kind is EffectKind.LEVEL_UP
    assert resolve_effect("Evolution Stone").kind is EffectKind.EVOLUTION_STONE
    assert resolve_effect("Accessory").kind is EffectKind.HOLD
    assert resolve_effect("Poké Ball").kind is EffectKind.HOLD
    assert resolve_effect("Pokeball").kind is EffectKind.UNUSABLE
    assert not resolve_effect("Key Item").usable


def test_stat_parse_aliases():
    assert Stat.parse("ATK") is Stat.ATTACK
    assert Stat.parse(" defense ") is Stat.DEFENSE

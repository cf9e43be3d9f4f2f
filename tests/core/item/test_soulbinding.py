"""Soulbound marker: is_soulbound / soul_bind"""

from soulbound.core.item.models import ItemMeta, ItemStack
from soulbound.core.item.soulbinding import SOULBOUND_MARKER, is_soulbound, soul_bind


class TestIsSoulbound:
    def test_none_item(self) -> None:
        assert is_soulbound(None) is False

    def test_no_metadata(self, make_sword) -> None:
        assert is_soulbound(make_sword()) is False

    def test_empty_lore(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=[])) is False

    def test_marker_first_line(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=["Soulbound"])) is True

    def test_marker_followed_by_lore(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=["Soulbound", "", "Forged in fire"])) is True

    def test_marker_not_first_line(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=["Forged in fire", "Soulbound"])) is False

    def test_case_sensitive(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=["soulbound"])) is False
        assert is_soulbound(make_sword(lore=["SOULBOUND"])) is False

    def test_no_trimming(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=[" Soulbound"])) is False
        assert is_soulbound(make_sword(lore=["Soulbound "])) is False

    def test_colored_marker_is_not_marker(self, make_sword) -> None:
        assert is_soulbound(make_sword(lore=["§dSoulbound"])) is False


class TestSoulBind:
    def test_marker_constant(self) -> None:
        assert SOULBOUND_MARKER == "Soulbound"

    def test_bind_item_without_meta(self, make_sword) -> None:
        item = make_sword()
        soul_bind(item)
        assert item.meta is not None
        assert item.meta.lore == ["Soulbound"]
        assert is_soulbound(item)

    def test_bind_item_with_empty_lore(self, make_sword) -> None:
        item = make_sword(lore=[])
        soul_bind(item)
        assert item.meta.lore == ["Soulbound"]

    def test_bind_preserves_prior_lore_order(self, make_sword) -> None:
        item = make_sword(lore=["L1", "L2"])
        soul_bind(item)
        assert item.meta.lore == ["Soulbound", "", "L1", "L2"]

    def test_bind_single_prior_line(self, make_sword) -> None:
        item = make_sword(lore=["Heirloom"])
        soul_bind(item)
        assert item.meta.lore == ["Soulbound", "", "Heirloom"]

    def test_bind_returns_same_item(self, make_sword) -> None:
        item = make_sword(lore=["L1"])
        assert soul_bind(item) is item

    def test_bind_keeps_meta_object_and_display_name(self) -> None:
        meta = ItemMeta(display_name="Excalibur", lore=["Old"])
        item = ItemStack(material="iron_sword", max_stack_size=1, meta=meta)
        soul_bind(item)
        assert item.meta is meta
        assert item.meta.display_name == "Excalibur"

    def test_bind_does_not_alias_previous_lore_list(self, make_sword) -> None:
        item = make_sword(lore=["L1"])
        old_lore = item.meta.lore
        soul_bind(item)
        assert old_lore == ["L1"]
        # the new lore stays growable
        item.meta.lore.append("extra")
        assert item.meta.lore[-1] == "extra"

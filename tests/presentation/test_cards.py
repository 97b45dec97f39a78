from dataclasses import replace
from datetime import date

import pytest

from facilitator_directory.domain.models import AccessType, Address, Network
from facilitator_directory.presentation.cards import (
    LOCK_ICON,
    MONEY_ICON,
    first_transaction_date,
    format_date,
    format_fee,
    render_access_icons,
    render_card,
)


@pytest.mark.parametrize(("fee", "expected"), [(0, "0% Fee"), (2.5, "2.5% Fee"), (1.0, "1% Fee"), (10, "10% Fee")])
def test_format_fee(fee, expected):
    assert format_fee(fee) == expected


def test_card_shows_fee(make_facilitator):
    assert "0% Fee" in render_card(make_facilitator(fee=0))
    assert "2.5% Fee" in render_card(make_facilitator(fee=2.5))
    assert 'data-fee="paid"' in render_card(make_facilitator(fee=2.5))


def test_access_icons():
    assert render_access_icons(AccessType.OPEN) == ""
    assert render_access_icons(None) == ""
    assert render_access_icons(AccessType.GATED) == LOCK_ICON
    assert render_access_icons(AccessType.GATED_PAID) == LOCK_ICON + MONEY_ICON


def test_open_card_has_no_access_icons(make_facilitator):
    card = render_card(make_facilitator(access_type=AccessType.OPEN))

    assert "access-icon" not in card
    assert 'data-access="open"' in card


def test_gated_paid_card_renders_lock_then_money(make_facilitator):
    card = render_card(make_facilitator(access_type=AccessType.GATED_PAID))

    assert card.count("🔒") == 1
    assert card.count("💰") == 1
    assert card.index("🔒") < card.index("💰")


def test_gated_card_renders_single_lock(make_facilitator):
    card = render_card(make_facilitator(access_type=AccessType.GATED))

    assert card.count("🔒") == 1
    assert "💰" not in card


def test_first_transaction_uses_earliest_date(make_facilitator):
    facilitator = make_facilitator(
        addresses={
            Network.BASE: (Address(address="0x1", date_of_first_transaction=date(2025, 11, 6)),),
            Network.SOLANA: (
                Address(address="So1"),
                Address(address="So2", date_of_first_transaction=date(2025, 3, 1)),
            ),
        }
    )

    assert first_transaction_date(facilitator) == date(2025, 3, 1)
    card = render_card(facilitator)
    assert "First Transaction" in card
    assert "Mar 1, 2025" in card


def test_first_transaction_block_omitted_without_dates(make_facilitator):
    card = render_card(make_facilitator())

    assert "First Transaction" not in card


def test_format_date_is_locale_independent():
    assert format_date(date(2025, 12, 31)) == "Dec 31, 2025"


def test_card_lists_networks_and_addresses_in_declared_order(make_facilitator):
    facilitator = make_facilitator(
        addresses={
            Network.SOLANA: (Address(address="So1"), Address(address="So2")),
            Network.BASE: (Address(address="0xb1"),),
        }
    )

    card = render_card(facilitator)

    assert 'data-networks="solana,base"' in card
    assert card.index('network-badge network-solana') < card.index('network-badge network-base')
    assert card.index(">So1<") < card.index(">So2<") < card.index(">0xb1<")
    assert '<span class="addresses-count">3</span>' in card
    assert 'href="https://explorer.solana.com/address/So2"' in card
    assert 'href="https://basescan.org/address/0xb1"' in card
    assert "View on Solana Explorer" in card
    assert 'src="base.svg"' in card


def test_card_header_and_links(make_facilitator):
    card = render_card(make_facilitator("acme"))

    assert 'id="card-acme"' in card
    assert '<div class="card-title">Acme</div>' in card
    assert "onerror=\"this.style.display='none'\"" in card
    assert "copyAddress('https://acme.example.com/facilitator', this)" in card
    assert "toggleAddresses('acme')" in card
    assert 'href="https://docs.example.com/acme"' in card
    assert "background: #123456;" in card


def test_card_escapes_metadata_text(make_facilitator):
    facilitator = make_facilitator("acme")
    facilitator = replace(facilitator, metadata=replace(facilitator.metadata, name="Pay & <Go>"))

    card = render_card(facilitator)

    assert "Pay &amp; &lt;Go&gt;" in card
    assert "<Go>" not in card


def test_card_accepts_plain_access_type_values(make_facilitator):
    card = render_card(make_facilitator(access_type="gated"))

    assert 'data-access="gated"' in card
    assert card.count("🔒") == 1
    assert 'data-access="open"' in render_card(make_facilitator(access_type=None))


def test_copy_hook_keeps_apostrophes_inside_js_string(make_facilitator):
    facilitator = replace(make_facilitator("acme"), facilitator_url="https://x.example/it's")

    card = render_card(facilitator)

    assert "copyAddress('https://x.example/it\\u0027s', this)" in card
    assert '<div class="main-address-text">https://x.example/it&#x27;s</div>' in card

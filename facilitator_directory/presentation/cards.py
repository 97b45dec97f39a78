"""HTML cards for facilitators in the directory page."""
from __future__ import annotations

import json
from datetime import date
from html import escape

from facilitator_directory.domain.explorers import explorer_name, explorer_url, network_icon
from facilitator_directory.domain.models import AccessType, Facilitator
from facilitator_directory.domain.services import CatalogAggregator

LOCK_ICON = '<span class="access-icon">🔒</span>'
MONEY_ICON = '<span class="access-icon">💰</span>'

# Fixed English abbreviations so output does not depend on the build locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_fee(fee: float) -> str:
    value = int(fee) if float(fee).is_integer() else fee
    return f"{value}% Fee"


def render_access_icons(access_type: AccessType | None) -> str:
    if access_type == AccessType.GATED_PAID:
        return LOCK_ICON + MONEY_ICON
    if access_type == AccessType.GATED:
        return LOCK_ICON
    return ""


def format_date(value: date) -> str:
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def first_transaction_date(facilitator: Facilitator) -> date | None:
    """Earliest first-transaction date across all addresses, if any is known."""
    dates = [
        address.date_of_first_transaction
        for _, address in facilitator.iter_addresses()
        if address.date_of_first_transaction is not None
    ]
    return min(dates) if dates else None


def render_address_list(facilitator: Facilitator) -> str:
    items: list[str] = []
    for network, address in facilitator.iter_addresses():
        raw = escape(address.address)
        items.append(
            f"""
        <div class="address-item">
          <span class="network-label {network.value}">{network.value}</span>
          <div class="address-text">{raw}</div>
          <div class="explorer-links">
            <a href="{escape(explorer_url(address.address, network))}" target="_blank" rel="noopener noreferrer" class="explorer-btn">
              <img src="{network_icon(network)}" alt="{network.value}" class="explorer-icon" />
              View on {explorer_name(network)}
            </a>
          </div>
        </div>
      """
        )
    return "".join(items)


def _js_string(value: str) -> str:
    """Body of a single-quoted JS string literal, safe inside an HTML attribute."""
    literal = json.dumps(value)[1:-1].replace("'", "\\u0027")
    return escape(literal)


def _render_network_badges(facilitator: Facilitator) -> str:
    return "".join(
        f'<span class="network-badge network-{network.value}">{network.value}</span>'
        for network in facilitator.addresses
    )


def _render_first_transaction(facilitator: Facilitator) -> str:
    earliest = first_transaction_date(facilitator)
    if earliest is None:
        return ""
    return f"""
        <div class="info-row">
          <span class="info-label">First Transaction</span>
          <span class="info-value">{format_date(earliest)}</span>
        </div>
        """


def render_card(facilitator: Facilitator) -> str:
    """Render one facilitator as a self-contained card fragment."""
    metadata = facilitator.metadata
    facilitator_id = escape(facilitator.id)
    url = escape(facilitator.facilitator_url)
    networks = ",".join(network.value for network in facilitator.addresses)
    access_type = AccessType(facilitator.access_type or AccessType.OPEN)
    access_icons = render_access_icons(access_type)
    access_html = f'<div class="access-icons">{access_icons}</div>' if access_icons else ""
    total_addresses = CatalogAggregator.address_count_of(facilitator)

    return f"""
    <div class="card" id="card-{facilitator_id}"
         data-networks="{networks}"
         data-fee="{'free' if facilitator.fee == 0 else 'paid'}"
         data-access="{access_type.value}">
      <div class="card-accent" style="background: {escape(metadata.color)};"></div>
      <div class="card-header">
        <img
          src="{escape(metadata.image)}"
          alt="{escape(metadata.name)} logo"
          class="card-logo"
          onerror="this.style.display='none'"
        />
        <div class="card-title-section">
          <div class="card-title">{escape(metadata.name)}</div>
          <div class="card-id">{facilitator_id}</div>
        </div>
      </div>

      <div class="card-content">
        <div class="main-address-container">
          <div class="main-address-label">
            Facilitator API URL
            {access_html}
            <span class="fee-display">{format_fee(facilitator.fee)}</span>
          </div>
          <div class="main-address-display">
            <div class="main-address-text">{url}</div>
            <button class="copy-btn" onclick="copyAddress('{_js_string(facilitator.facilitator_url)}', this)">
              Copy
            </button>
          </div>
        </div>

        <div class="info-row">
          <span class="info-label">Networks</span>
          <div class="networks">
            {_render_network_badges(facilitator)}
          </div>
        </div>

        <div class="info-row-wrapper">
          <div class="info-row addresses-interactive" onclick="toggleAddresses('{_js_string(facilitator.id)}')">
            <span class="info-label">Addresses</span>
            <span class="addresses-count">{total_addresses}</span>
          </div>

          <div class="address-list">
            {render_address_list(facilitator)}
          </div>
        </div>
        {_render_first_transaction(facilitator)}
        <a href="{escape(metadata.docs_url)}" target="_blank" class="card-link">
          View Documentation
        </a>
      </div>
    </div>
  """

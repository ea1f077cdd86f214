from __future__ import annotations

import json
from html import escape

from storefront.domain.entities.package import PackageGroup


CHECKOUT_LABEL = "Checkout with Stripe"
PREPARING_LABEL = "Preparing checkout…"
API_FAILED_MESSAGE = "Checkout API failed"
STRIPE_MISSING_MESSAGE = "Stripe failed to load"
SESSION_MISSING_MESSAGE = "Checkout session id missing"
FALLBACK_ERROR_MESSAGE = "Error during checkout"


def _format_price(price) -> str:
    return f"${price:,.2f}".replace(".00", "")


def _script_json(value) -> str:
    # Keeps the payload from closing the surrounding <script> tag.
    return json.dumps(value).replace("</", "<\\/")


def checkout_client_config(*, publishable_key: str, checkout_path: str) -> dict:
    return {
        "publishableKey": publishable_key,
        "checkoutPath": checkout_path,
        "labels": {"idle": CHECKOUT_LABEL, "preparing": PREPARING_LABEL},
        "messages": {
            "apiFailed": API_FAILED_MESSAGE,
            "stripeMissing": STRIPE_MISSING_MESSAGE,
            "sessionMissing": SESSION_MISSING_MESSAGE,
            "fallback": FALLBACK_ERROR_MESSAGE,
        },
    }


def _render_group(group: PackageGroup) -> str:
    options = "\n".join(
        (
            f'<button type="button" class="option" data-name="{escape(package.name)}" '
            f'data-group="{escape(package.group)}" data-price="{package.price}">'
            f"<span>{escape(package.name)}</span><span>{_format_price(package.price)}</span></button>"
        )
        for package in group.packages
    )
    return f'<div class="column"><h2>{escape(group.label)}</h2>\n{options}\n</div>'


# One selection at a time; the in-flight flag is released in finally.
_CHECKOUT_SCRIPT = """
const config = %(config)s;
const stripePromise = config.publishableKey && window.Stripe
  ? Promise.resolve(window.Stripe(config.publishableKey))
  : Promise.resolve(null);
let selected = null;
let loading = false;
const button = document.getElementById('checkout');

function render() {
  button.disabled = !selected || loading;
  button.textContent = loading ? config.labels.preparing : config.labels.idle;
  document.querySelectorAll('.option').forEach((el) => {
    const active = selected && selected.name === el.dataset.name && selected.group === el.dataset.group;
    el.classList.toggle('active', Boolean(active));
  });
}

document.querySelectorAll('.option').forEach((el) => {
  el.addEventListener('click', () => {
    selected = { name: el.dataset.name, price: Number(el.dataset.price), group: el.dataset.group };
    render();
  });
});

button.addEventListener('click', async () => {
  if (!selected || loading) return;
  loading = true;
  render();
  try {
    const response = await fetch(config.checkoutPath, {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({ pkg: selected })
    });
    if (!response.ok) throw new Error(config.messages.apiFailed);
    const data = await response.json();
    const stripe = await stripePromise;
    if (!stripe) throw new Error(config.messages.stripeMissing);
    if (!data.id) throw new Error(config.messages.sessionMissing);
    await stripe.redirectToCheckout({ sessionId: data.id });
  } catch (err) {
    alert(err.message || config.messages.fallback);
  } finally {
    loading = false;
    render();
  }
});

render();
"""

_STYLE = """
body { margin: 0; font-family: -apple-system, BlinkMacSystemFont, "Helvetica Neue", Arial, sans-serif; }
.page { min-height: 100vh; display: flex; align-items: center; justify-content: center; padding: 24px; }
.card { width: 100%; max-width: 960px; border: 1px solid #e5e5e5; border-radius: 20px; padding: 28px; }
.columns { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
.column { background: #fafafa; border: 1px solid #eee; border-radius: 16px; padding: 16px; }
.option { width: 100%; display: flex; justify-content: space-between; padding: 14px 16px;
  border: 1px solid #e5e5e5; border-radius: 12px; background: #fff; margin-bottom: 10px; cursor: pointer; }
.option.active { border-color: #0070f3; box-shadow: 0 0 0 3px rgba(0,112,243,.12); }
#checkout { margin-top: 24px; width: 100%; padding: 16px; border-radius: 14px; background: #000;
  color: #fff; font-size: 16px; font-weight: 600; cursor: pointer; }
#checkout:disabled { opacity: 0.6; cursor: not-allowed; }
.notice { padding: 12px 16px; border-radius: 12px; background: #f2f8ff; margin-bottom: 16px; }
.note { margin-top: 10px; font-size: 12px; color: #666; }
"""


def render_storefront_page(
    *,
    groups: list[PackageGroup],
    note: str,
    publishable_key: str,
    checkout_path: str,
    success: bool = False,
    canceled: bool = False,
) -> str:
    """Render the package picker.

    Only the publishable key is embedded; the secret key stays on the server.
    """
    notice = ""
    if success:
        notice = '<p class="notice">Payment received. Thank you!</p>'
    elif canceled:
        notice = '<p class="notice">Checkout canceled. Your selection was not charged.</p>'

    config = checkout_client_config(publishable_key=publishable_key, checkout_path=checkout_path)
    columns = "\n".join(_render_group(group) for group in groups)
    script = _CHECKOUT_SCRIPT % {"config": _script_json(config)}

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Choose your package</title>
<style>{_STYLE}</style>
<script src="https://js.stripe.com/v3/"></script>
</head>
<body>
<div class="page"><div class="card">
<h1>Choose your package</h1>
{notice}
<div class="columns">
{columns}
</div>
<button type="button" id="checkout" disabled>{CHECKOUT_LABEL}</button>
<p class="note">* {escape(note)}</p>
</div></div>
<script>{script}</script>
</body>
</html>
"""

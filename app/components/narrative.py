from __future__ import annotations

import html
from typing import Any, MutableMapping, Sequence

import streamlit as st

from data.notifications import Notification

_TOAST_ICONS = {"error": "🚫", "warning": "⚠️"}


def render_page_intro(title: str, subtitle: str | None = None) -> None:
    st.markdown(
        f"""
<div class="page-intro">
  <div class="page-intro-title">{html.escape(title)}</div>
  {f'<div class="page-intro-subtitle">{html.escape(subtitle)}</div>' if subtitle else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def placeholder_html(message: str) -> str:
    return f"""
<div class="placeholder">
  <div class="placeholder-body">{html.escape(message)}</div>
</div>
"""


def render_placeholder(message: str) -> None:
    """Fixed empty/error state used in place of a chart or table."""
    st.markdown(placeholder_html(message), unsafe_allow_html=True)


def render_notifications(notifications: Sequence[Notification]) -> None:
    """Transient toasts; each notification is shown exactly once."""
    for n in notifications:
        st.toast(n.message, icon=_TOAST_ICONS.get(n.level))


FLASH_KEY = "_flash"


def queue_flash(store: MutableMapping[str, Any], message: str, icon: str | None = None) -> None:
    """Hold a toast for the next script run."""
    pending = list(store.get(FLASH_KEY) or [])
    pending.append((message, icon))
    store[FLASH_KEY] = pending


def pop_flash(store: MutableMapping[str, Any]) -> list[tuple[str, str | None]]:
    return list(store.pop(FLASH_KEY, None) or [])


def render_flash(store: MutableMapping[str, Any]) -> None:
    for message, icon in pop_flash(store):
        st.toast(message, icon=icon)

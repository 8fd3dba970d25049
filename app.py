import score_dashboard.bootstrap_env  # must be first to set env/secrets and logging
import streamlit as st
import structlog

from score_dashboard.config import load_settings
from score_dashboard.ui.layout import setup_page, sidebar_navigation
from score_dashboard.ui.pages import live, totals
from score_dashboard.ui.pages.context import PageContext

logger = structlog.get_logger(__name__)

PAGE_RENDERERS = {
    "live": live.render,
    "totals": totals.render,
}


def main() -> None:
    setup_page()
    st.title("Fun vs Tired")

    try:
        settings = load_settings()
    except ValueError as exc:
        logger.error("invalid_settings", error=str(exc))
        st.error(f"Configuration error: {exc}")
        return

    view = sidebar_navigation()
    force_refresh = st.sidebar.button("🔄 Refresh Data")

    prev_view = st.session_state.get("sd_prev_view")
    view_changed = prev_view is not None and prev_view != view.key
    st.session_state["sd_prev_view"] = view.key

    st.sidebar.caption(f"Source: {settings.api_url}")

    context = PageContext(
        settings=settings,
        force_refresh=force_refresh,
        view_changed=view_changed,
    )

    renderer = PAGE_RENDERERS.get(view.key)
    if renderer is None:
        st.warning(f"Unknown view: {view.key}")
        return
    renderer(context)


if __name__ == "__main__":
    main()

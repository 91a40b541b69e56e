import logging

import streamlit as st

from inference_calc.config import settings
from inference_calc.ui.layout import render_dashboard

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(
        page_title="CPU vs GPU Inference Calculator",
        layout="wide",
    )
    logger.debug("Rendering dashboard")
    render_dashboard()


if __name__ == "__main__":
    main()

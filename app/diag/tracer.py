import json
import logging
import time
from typing import Any

import streamlit as st
from streamlit import runtime

logger = logging.getLogger(__name__)


def jdump(obj: Any) -> str:
    return json.dumps(obj, default=str, sort_keys=True)


def trace(tag: str, **kvs: Any) -> str:
    """Log a diagnostic line and echo it on the page when Streamlit is running."""
    ts = time.time()
    line = f"{ts:.3f} [{tag}] {jdump(kvs)}"
    logger.info(line)
    if runtime.exists():
        st.markdown(f"**🧭 {ts:.3f} [{tag}]**\n\n```json\n{jdump(kvs)}\n```")
    return line

# main.py

"""Streamlit web UI for the sensitive word filter.

Provides a simple interface to submit user text and receive a version
with every sensitive keyword masked.
"""

import streamlit as st
import logging
from wordfilter.logging_config import configure_logging
from wordfilter.service.config import settings
from wordfilter.service.pipeline import FilterService, filter_text

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts input text from
    the user, invokes the filtering pipeline, and displays the masked
    output along with basic status information.
    """
    st.set_page_config(
        layout="wide", page_title="Sensitive Word Filter", page_icon="🛡️"
    )

    st.title("Sensitive Word Filter")
    st.markdown(
        "Masks sensitive keywords in user-submitted text, including keywords split up by punctuation or spaces."
    )
    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input Text")
        text_input = st.text_area(
            "Source Text",
            height=400,
            placeholder="Paste text to filter here...",
        )

    with col2:
        st.subheader("Filtered Output")

        if st.button("Filter", type="primary"):
            if not text_input or not text_input.strip():
                st.warning("Please enter text to process.")
                logger.warning("Filtering attempted with empty input")

            else:
                result = filter_text(text_input)

                if result.metadata.get("status") == "failed":
                    st.error(f"Filtering failed: {result.metadata['error']}")
                else:
                    st.text_area(
                        "Filtered Text", value=result.filtered_text, height=400
                    )

                    if result.flagged:
                        st.warning(
                            f"Masked {len(result.matches)} sensitive occurrence(s)."
                        )
                    else:
                        st.success("No sensitive words found.")

    with st.sidebar:
        st.header("About")
        st.markdown(f"""
        Each keyword from the word list is replaced by `{settings.replacement}`.

        - Latin letters, digits and CJK characters are matched
        - Punctuation and whitespace inside a keyword do not hide it
        - Everything else is kept exactly as written
        """)

        st.header("Status")
        try:
            engine = FilterService.get_instance()
            st.success(f"System Ready ({engine.dictionary.keyword_count} keywords)")
        except Exception:
            logger.error("Filter engine unavailable", exc_info=True)
            st.error("Filter engine unavailable")


if __name__ == "__main__":
    main()

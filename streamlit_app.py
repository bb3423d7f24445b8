from __future__ import annotations
import json
import streamlit as st

from podlinker.links import from_url_safe_base64
from podlinker.log import setup_logging
from podlinker.resolvers.orchestrator import resolve_podlink


@st.cache_resource
def _init_logging():
    return setup_logging()


st.set_page_config(page_title="Podlink Finder", page_icon="🔗")
_init_logging()

with st.sidebar:
    st.header("How to Use This Tool")

    with st.expander("Finding an episode link", expanded=True):
        st.markdown("""
        **Turn a show name and episode title into a pod.link URL.**

        **Workflow:**
        1. Type the show name as it appears on Apple Podcasts
        2. Type the episode title (a distinctive part of it is enough)
        3. Click "Find Episode Link"
        4. Copy or open the pod.link URL
        """)

    with st.expander("Tips & Limitations", expanded=False):
        st.markdown("""
        **Tips:**
        - Matching ignores case and extra spaces
        - A shorter title works if it is contained in the real one
        - When no episode matches, the first few titles of the feed are shown

        **Limitations:**
        - Shows are looked up through the Apple Podcasts search API only
        - Platform exclusives without a public RSS feed cannot be linked
        """)

st.title("Podlink Finder")
st.caption("Type a show name and an episode title. Returns the canonical pod.link URL for that episode.")

if "last_result" not in st.session_state:
    st.session_state.last_result = None

with st.form("resolver"):
    show_name = st.text_input("Show name", placeholder="The Daily")
    episode_title = st.text_input("Episode title", placeholder="The Sunday Read")
    submitted = st.form_submit_button("Find Episode Link")

if submitted:
    if not show_name.strip() or not episode_title.strip():
        st.error("Please enter both a show name and an episode title")
        st.stop()
    with st.spinner("Searching Apple Podcasts and reading the feed..."):
        st.session_state.last_result = resolve_podlink(show_name, episode_title)

res = st.session_state.last_result
if res is not None:
    if res.ok:
        st.success("Episode found")
        st.write("**Podlink URL:**")
        st.code(res.link.url, language=None)

        col1, col2 = st.columns(2)
        with col1:
            st.link_button("Open podlink", res.link.url)
        with col2:
            st.write(f"**Apple ID:** {res.link.show_id}")

        st.write(f"**Podcast:** {res.link.show_name}")
        st.write(f"**Episode:** {res.link.episode_title}")
        with st.expander("Technical Details"):
            token = res.link.url.rsplit("/", 1)[-1]
            st.write(f"**GUID:** `{res.link.episode_identifier}`")
            st.write(f"**Encoded GUID:** `{token}`")
            st.caption(f"Decodes back to: {from_url_safe_base64(token)}")
    elif res.http_status == 404:
        st.warning(f"{res.error}: {res.message}")
        if res.available_episodes:
            st.write("**Recent episodes in this feed:**")
            for title in res.available_episodes:
                st.write(f"- {title}")
    else:
        st.error(f"{res.error}: {res.message}")

    st.divider()
    st.subheader("Debug JSON")
    st.code(
        json.dumps({"status": res.http_status, "body": res.to_payload()}, ensure_ascii=False, indent=2),
        language="json",
    )

st.markdown(
    """
    ---
    **Notes**
    - Show lookup uses the public Apple Podcasts Search API.
    - Episodes are matched by title against the show's RSS feed.
    - The link is built from the episode GUID, base64url-encoded without padding.
    """
)

"""
Streamlit-based web UI for the Research Paper Assistant.

Run with:
    pip install -e .
    streamlit run ui_app.py

The API key typed here lives only in the Streamlit session; it is sent
with each request and never stored.
"""

import time
from typing import Dict, List, Optional

import requests
import streamlit as st

from research_assistant.config import settings
from research_assistant.export import export_filename


API_BASE = settings.api_base_url

CITATION_STYLE_LABELS = {
    "academic": "Academic (APA)",
    "web": "Web sources",
    "informal": "Informal",
}


class BackendError(Exception):
    pass


def _check(resp: requests.Response) -> dict:
    if resp.ok:
        return resp.json()
    try:
        detail = resp.json().get("detail")
    except ValueError:
        detail = None
    raise BackendError(detail if isinstance(detail, str) else f"Backend returned {resp.status_code}")


def fetch_research_types() -> List[dict]:
    resp = requests.get(f"{API_BASE}/research/types", timeout=30)
    return _check(resp)


def suggest_title(query: str, api_key: Optional[str]) -> str:
    resp = requests.post(
        f"{API_BASE}/research/title",
        json={"query": query, "api_key": api_key or None},
        timeout=120,
    )
    return _check(resp)["title"]


def start_research(payload: Dict[str, Optional[str]]) -> dict:
    resp = requests.post(f"{API_BASE}/research/start", json=payload, timeout=30)
    return _check(resp)


def get_status(task_id: str) -> dict:
    resp = requests.get(f"{API_BASE}/research/status/{task_id}", timeout=30)
    return _check(resp)


def get_markdown(record_id: str) -> str:
    resp = requests.get(f"{API_BASE}/research/history/{record_id}/markdown", timeout=30)
    if not resp.ok:
        raise BackendError(f"Backend returned {resp.status_code}")
    return resp.text


def clear_history() -> None:
    _check(requests.delete(f"{API_BASE}/research/history", timeout=30))


def _init_session() -> None:
    defaults = {
        "api_key": "",
        "query": "",
        "title": "",
        "show_title_edit": False,
        "final_status": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def render_sections(sections: List[dict]) -> None:
    for section in sections:
        with st.expander(section["title"], expanded=True):
            st.markdown(section["content"])
            if section.get("citations"):
                st.markdown("**References**")
                for idx, citation in enumerate(section["citations"], start=1):
                    st.markdown(f"{idx}. {citation}")


def run_research(payload: Dict[str, Optional[str]], status_container, results_container) -> Optional[dict]:
    try:
        status = start_research(payload)
    except (BackendError, requests.RequestException) as exc:
        st.error(str(exc))
        return None

    task_id = status["task_id"]
    total = max(status["total_sections"], 1)
    progress_bar = status_container.progress(0, text="Starting research...")
    sections_box = results_container.empty()

    # Poll until the backend reports a terminal state
    while status["status"] not in {"completed", "error"}:
        time.sleep(1.0)
        try:
            status = get_status(task_id)
        except (BackendError, requests.RequestException) as exc:
            st.error(f"Error while fetching status: {exc}")
            return None

        done = len(status.get("sections", []))
        progress_bar.progress(
            min(done / total, 1.0), text=f"Sections completed: {done} of {status['total_sections']}"
        )
        with sections_box.container():
            render_sections(status.get("sections", []))

    progress_bar.empty()
    sections_box.empty()
    return status


def main() -> None:
    st.set_page_config(page_title="Research Paper Assistant", layout="wide")
    _init_session()

    st.title("Research Paper Assistant")
    st.write(
        "Describe what you want to research. The assistant proposes a title, then "
        "writes each section of the chosen research type with citations."
    )

    with st.sidebar:
        st.session_state.api_key = st.text_input(
            "OpenAI API key",
            value=st.session_state.api_key,
            type="password",
            help="Used for this session only. Leave empty if the server has a key configured.",
        )
        if st.button("Clear history"):
            try:
                clear_history()
                st.success("History cleared.")
            except (BackendError, requests.RequestException) as exc:
                st.error(str(exc))

    try:
        research_types = fetch_research_types()
    except (BackendError, requests.RequestException) as exc:
        st.error(f"Backend unavailable: {exc}")
        return

    with st.form("query_form"):
        query = st.text_area("Research query", value=st.session_state.query)
        submitted = st.form_submit_button("Generate title")

    if submitted:
        if not query.strip():
            st.warning("Please enter a research query.")
        else:
            st.session_state.query = query
            st.session_state.final_status = None
            with st.spinner("Generating title..."):
                try:
                    st.session_state.title = suggest_title(query, st.session_state.api_key)
                    st.session_state.show_title_edit = True
                except (BackendError, requests.RequestException) as exc:
                    st.session_state.show_title_edit = False
                    st.error(str(exc))

    mode = st.radio(
        "Research mode",
        options=["basic", "advanced"],
        format_func=lambda m: "Basic Research" if m == "basic" else "Advanced Research",
        horizontal=True,
    )
    type_titles = {t["name"]: t["title"] for t in research_types}
    research_type = st.radio(
        "Research type", options=list(type_titles), format_func=lambda t: type_titles[t]
    )
    citation_style = st.selectbox(
        "Citation style", options=list(CITATION_STYLE_LABELS), format_func=CITATION_STYLE_LABELS.get
    )

    status_container = st.container()
    results_container = st.container()

    if st.session_state.show_title_edit:
        st.caption("Edit the title to better focus the research target.")
        title = st.text_input("Research title", value=st.session_state.title)
        if st.button("Accept Research Target", type="primary"):
            st.session_state.title = title
            st.session_state.show_title_edit = False
            st.session_state.final_status = run_research(
                {
                    "query": st.session_state.query,
                    "title": title,
                    "research_type": research_type,
                    "research_mode": mode,
                    "citation_style": citation_style,
                    "api_key": st.session_state.api_key or None,
                },
                status_container,
                results_container,
            )

    final_status = st.session_state.final_status
    if not final_status:
        return

    if final_status["status"] == "error":
        st.error(final_status.get("error_message") or "An error occurred during research")

    with results_container:
        st.subheader(final_status["title"])
        render_sections(final_status.get("sections", []))

        record_id = final_status.get("record_id")
        if final_status["status"] == "completed" and record_id:
            try:
                markdown = get_markdown(record_id)
            except (BackendError, requests.RequestException) as exc:
                st.error(str(exc))
                return
            st.download_button(
                "Download Markdown",
                data=markdown,
                file_name=export_filename(final_status["title"]),
                mime="text/markdown",
            )


if __name__ == "__main__":
    main()

import os

import pandas as pd
import requests
import streamlit as st

st.set_page_config(page_title="Create Prompt", layout="wide")

TOPIC_TYPE_LABELS = {"text": "Text", "url": "URL", "askai": "Ask AI"}

# ---- Session state defaults ----
for k, v in {
    "category": None,
    "topic_type": "text",
    "topic": "",
    "tone": None,
    "ask_ai_input": "",
    "suggestions": [],
    "suggestion_idx": None,
    "prompts": None,
    "tone_notice": None,
}.items():
    st.session_state.setdefault(k, v)


# ---- Sidebar ----
st.sidebar.header("Settings")
default_api = os.environ.get("API_URL") or st.session_state.get(
    "api_url", "http://localhost:8000"
)
if "api_url" not in st.session_state:
    st.session_state["api_url"] = default_api

API_URL = st.sidebar.text_input("API URL", key="api_url")
show_raw = st.sidebar.checkbox(
    "Show raw JSON (debug)",
    key="show_raw",
    help="Display the raw API response for debugging.",
)


@st.cache_data(ttl=300, show_spinner=False)
def load_options(api_url: str) -> dict:
    resp = requests.get(f"{api_url}/options", timeout=10)
    resp.raise_for_status()
    return resp.json()


def _error_messages(resp: requests.Response) -> list[str]:
    """Flatten FastAPI error bodies (422 lists or plain detail strings)."""
    try:
        detail = resp.json().get("detail")
    except ValueError:
        return [f"{resp.status_code} {resp.text}"]
    if isinstance(detail, list):
        msgs = []
        for err in detail:
            msg = str(err.get("msg", ""))
            msgs.append(msg.removeprefix("Value error, "))
        return msgs or [str(resp.status_code)]
    return [str(detail or resp.status_code)]


def _reset_for_topic_type() -> None:
    # Switching mode starts the form over; "askai" keeps the picked suggestion.
    if st.session_state["topic_type"] != "askai":
        st.session_state["topic"] = ""
        st.session_state["tone"] = None
        st.session_state["ask_ai_input"] = ""
        st.session_state["suggestions"] = []
        st.session_state["suggestion_idx"] = None
        st.session_state["tone_notice"] = None
    st.session_state["prompts"] = None


def _apply_suggestion() -> None:
    idx = st.session_state.get("suggestion_idx")
    if idx is None:
        return
    picked = st.session_state["suggestions"][idx]
    st.session_state["topic"] = picked.get("topic", "")
    tone = picked.get("tone")
    tones = load_options(st.session_state["api_url"])["tones"]
    if tone in tones:
        st.session_state["tone"] = tone
        st.session_state["tone_notice"] = None
    else:
        st.session_state["tone"] = None
        st.session_state["tone_notice"] = tone
    st.toast("Fields Auto-filled! Topic and tone have been set from AI suggestion")


try:
    options = load_options(API_URL)
except Exception as e:
    st.error(f"Could not load form options from {API_URL}: {e}")
    st.stop()

st.title("Create Prompt")
st.caption(
    "Generate system and user prompts for AI-powered content creation "
    "without generating the actual content"
)

col_form, col_out = st.columns([1, 2])

# ---- Prompt configuration ----
with col_form:
    st.header("Prompt Configuration")
    st.selectbox(
        "Post Category",
        options["categories"],
        key="category",
        index=None,
        placeholder="Choose your content type",
    )
    st.radio(
        "Topic Type",
        options["topic_types"],
        key="topic_type",
        format_func=lambda t: TOPIC_TYPE_LABELS.get(t, t),
        horizontal=True,
        on_change=_reset_for_topic_type,
    )

    topic_type = st.session_state["topic_type"]

    # ---- Ask AI ----
    if topic_type == "askai":
        st.text_area(
            "Ask AI",
            key="ask_ai_input",
            placeholder="Describe what you want to post about...",
        )
        if st.button("Get Suggestions", key="btn_suggest"):
            if not st.session_state["ask_ai_input"].strip():
                st.error("Input Required: Please enter your AI query")
            elif not st.session_state.get("category"):
                st.error("Category Required: Please select a post category first")
            else:
                with st.spinner("Asking AI for ideas..."):
                    try:
                        resp = requests.post(
                            f"{API_URL}/suggest_topics",
                            json={
                                "category": st.session_state["category"],
                                "description": st.session_state["ask_ai_input"],
                            },
                            timeout=None,
                        )
                        if resp.ok:
                            st.session_state["suggestions"] = (
                                resp.json().get("ideas") or []
                            )
                            st.session_state["suggestion_idx"] = None
                            st.toast(
                                "AI Suggestions Ready! Select a suggestion to "
                                "auto-fill your form"
                            )
                        elif resp.status_code == 503:
                            st.error(
                                "Configuration Error: " + "; ".join(_error_messages(resp))
                            )
                        else:
                            st.error(
                                "AI Request Failed: Failed to get AI suggestions. "
                                "Please try again."
                            )
                    except requests.RequestException as e:
                        st.error(f"AI Request Failed: {e}")

        suggestions = st.session_state["suggestions"]
        if suggestions:
            st.dataframe(
                pd.DataFrame(suggestions)[["title", "topic", "tone"]],
                width="stretch",
                hide_index=True,
            )
            st.selectbox(
                "Pick a suggestion",
                list(range(len(suggestions))),
                key="suggestion_idx",
                index=None,
                format_func=lambda i: suggestions[i].get("title", f"Idea {i + 1}"),
                on_change=_apply_suggestion,
            )

    topic_label = "Video URL" if topic_type == "url" else "Topic"
    topic_placeholder = (
        "youtube.com/watch?v=..."
        if topic_type == "url"
        else "What should the post be about?"
    )
    st.text_input(topic_label, key="topic", placeholder=topic_placeholder)
    st.selectbox(
        "Post Tone",
        options["tones"],
        key="tone",
        index=None,
        placeholder="Choose a tone",
    )
    if st.session_state.get("tone_notice") and not st.session_state.get("tone"):
        st.warning(
            f"The suggested tone \"{st.session_state['tone_notice']}\" is not one "
            "of the available tones. Please pick a tone."
        )

    # Ask AI mode needs a picked (or typed) topic and a tone first.
    generate_disabled = topic_type == "askai" and not (
        st.session_state.get("topic") and st.session_state.get("tone")
    )

    if st.button(
        "Generate Prompts",
        type="primary",
        key="btn_generate",
        disabled=generate_disabled,
    ):
        payload = {
            "category": st.session_state.get("category") or "",
            "topic": st.session_state.get("topic") or "",
            "topic_type": topic_type,
            "tone": st.session_state.get("tone") or "",
        }
        try:
            resp = requests.post(f"{API_URL}/compose", json=payload, timeout=30)
            if resp.ok:
                st.session_state["prompts"] = resp.json()
                st.toast(
                    "Prompts Generated Successfully! "
                    f"(Model: {st.session_state['prompts'].get('provider')})"
                )
            else:
                for msg in _error_messages(resp):
                    st.error(msg)
        except requests.RequestException as e:
            st.error(f"Generation Failed: {e}")

# ---- Generated prompts ----
with col_out:
    data = st.session_state.get("prompts")
    if not data:
        st.info("Fill out the form and generate prompts to see them here.")
    else:
        st.subheader("Target Model")
        st.write(f"{data.get('provider')} ({data.get('model')})")
        # Code blocks carry a copy-to-clipboard button.
        st.subheader("System Prompt")
        st.code(data.get("system_prompt", ""), language=None, wrap_lines=True)
        st.subheader("User Prompt")
        st.code(data.get("user_prompt", ""), language=None, wrap_lines=True)
        st.subheader("System Prompt & User Prompt")
        st.code(data.get("combined_prompt", ""), language=None, wrap_lines=True)
        if show_raw:
            with st.expander("Raw Response JSON"):
                st.json(data)

"""
UI layer
Purpose: Streamlit-only glue. Renders widgets/tabs, collects user inputs, and delegates
all work to the session engine. Keeps UI concerns (layout/state widgets) separate from
business logic so logic can be unit tested without Streamlit.
"""

import streamlit as st
from datetime import datetime
from typing import Optional

from interview_core.config import load_settings
from interview_core.controller import InterviewSessionEngine
from interview_core.errors import InterviewError
from interview_core.logging_config import setup_logging
from interview_core.models import Category, Session
from interview_core.persistence.session_store import JsonFileKeyValueStore
from interview_core.services.progress import (
    duration_minutes,
    format_countdown,
    score_label,
)


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Interview Practice",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)

SETTINGS = load_settings()

# ---------------------------
# UI constants
# ---------------------------
CATEGORIES = [c.value for c in Category]
CATEGORY_LABELS = {c.value: c.label for c in Category}


@st.cache_resource
def get_engine() -> InterviewSessionEngine:
    """One engine per process; it is the only writer of the store key."""
    setup_logging(SETTINGS.log_level)
    return InterviewSessionEngine(
        JsonFileKeyValueStore(SETTINGS.store_dir),
        store_key=SETTINGS.store_key,
        questions_per_session=SETTINGS.questions_per_session,
    )


# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("display_name", "")
st_session.setdefault("category", CATEGORIES[0])
st_session.setdefault("active_id", None)
st_session.setdefault("question_idx", 0)
st_session.setdefault("question_started_ts", None)
st_session.setdefault("answer_key", 0)
st_session.setdefault("results_id", None)


# ---------------------------
# Helpers
# ---------------------------
def report_storage_problem(engine: InterviewSessionEngine) -> None:
    """Surface a store failure once; the engine keeps working in memory."""
    error = engine.take_persistence_error()
    if error:
        st.toast(f"{error} Your progress is kept for this run only.", icon="⚠️")


def run(action, *args):
    """Call an engine operation and turn its errors into toasts."""
    engine = get_engine()
    try:
        return action(*args)
    except InterviewError as e:
        st.toast(str(e), icon="⚠️")
        return None
    finally:
        report_storage_problem(engine)


def go_to_question(idx: int) -> None:
    st_session.question_idx = idx
    st_session.question_started_ts = datetime.now().timestamp()
    st_session.answer_key += 1


def active_session() -> Optional[Session]:
    if not st_session.active_id:
        return None
    return get_engine().get(st_session.active_id)


def start_interview(role_title: str) -> None:
    session = run(get_engine().create, st_session.category, role_title)
    if session:
        st_session.active_id = session.id
        go_to_question(0)


def resume_interview(session_id: str) -> None:
    engine = get_engine()
    st_session.active_id = session_id
    go_to_question(run(engine.first_unanswered_index, session_id) or 0)


def save_current(answer: str) -> bool:
    session = active_session()
    if not session:
        return False
    return run(get_engine().record_answer, session.id, st_session.question_idx, answer) is not None


def finish_interview() -> None:
    session = run(get_engine().complete, st_session.active_id)
    if session:
        st_session.results_id = session.id
        st_session.active_id = None
        st.toast("Interview completed. Your feedback is ready in the Results tab.")


def remaining_seconds() -> int:
    started = st_session.question_started_ts or datetime.now().timestamp()
    elapsed = datetime.now().timestamp() - started
    return max(0, int(SETTINGS.seconds_per_question - elapsed))


def render_feedback(session: Session) -> None:
    """Score, summary, strengths/improvements and per-question notes."""
    fb = session.feedback
    if not fb:
        st.info("This interview has not been completed yet.")
        return

    c1, c2, c3 = st.columns([1, 1, 2])
    with c1:
        st.metric("Score", f"{session.score}%")
        st.progress(session.score / 100)
    with c2:
        minutes = duration_minutes(session)
        st.metric("Duration", f"{minutes} min" if minutes is not None else "—")
    with c3:
        st.markdown(f"### {score_label(session.score)}")
        st.write(fb.general_feedback)

    cols = st.columns(2)
    sections = [
        ("**Strengths**", fb.strengths),
        ("**Areas to improve**", fb.improvements),
    ]
    for (title, items), col in zip(sections, cols):
        with col:
            st.markdown(title)
            st.markdown("\n".join(f"- {it}" for it in items) if items else "—")

    st.markdown("#### Question by question")
    for idx, (question, answer, note) in enumerate(
        zip(session.questions, session.answers, fb.detailed_feedback), start=1
    ):
        with st.expander(f"Q{idx}. {question}"):
            st.markdown("**Your answer**")
            st.write(answer.strip() or "_No answer_")
            st.markdown("**Feedback**")
            st.write(note)


# ---------------------------
# Pages
# ---------------------------
def render_practice(user_present: bool) -> None:
    if not user_present:
        st.info("Enter your name in the sidebar to start practicing.")
        return

    session = active_session()
    if session is None or session.is_completed:
        st.subheader("Start a new interview")
        st_session.category = st.radio(
            "Category",
            CATEGORIES,
            format_func=lambda v: CATEGORY_LABELS[v],
            index=CATEGORIES.index(st_session.category),
            horizontal=True,
        )
        with st.form("start_form"):
            role_title = st.text_input(
                "Job title", placeholder="e.g. Backend Engineer"
            )
            if st.form_submit_button("Start interview", type="primary"):
                start_interview(role_title)
                st.rerun()
        return

    total = len(session.questions)
    idx = min(st_session.question_idx, total - 1)
    st.caption(
        f"{CATEGORY_LABELS[session.category.value]} · {session.role_title} · "
        f"Question {idx + 1} of {total}"
    )
    st.progress((idx + 1) / total)

    left = remaining_seconds()
    timer = format_countdown(left)
    if left == 0:
        st.warning(f"⏱ {timer}. Time is up for this question; wrap up your answer.")
    else:
        st.markdown(f"⏱ **{timer}** left for this question")

    st.markdown(f"### {session.questions[idx]}")
    answer = st.text_area(
        "Your answer",
        value=session.answers[idx],
        height=220,
        key=f"answer_{st_session.answer_key}",
    )

    prev_col, next_col, _ = st.columns([1, 1, 4])
    with prev_col:
        if st.button("Previous", disabled=idx == 0):
            if save_current(answer):
                go_to_question(idx - 1)
                st.rerun()
    with next_col:
        last = idx == total - 1
        if st.button("Finish" if last else "Next", type="primary"):
            if not answer.strip():
                st.toast("Please provide an answer before continuing.", icon="⚠️")
            elif save_current(answer):
                if last:
                    finish_interview()
                else:
                    go_to_question(idx + 1)
                st.rerun()


def render_results(user_present: bool) -> None:
    if not user_present:
        st.info("Enter your name in the sidebar to see your results.")
        return

    engine = get_engine()
    completed = [s for s in engine.list() if s.is_completed]
    if not completed:
        st.info("Complete an interview to see feedback here.")
        return

    ids = [s.id for s in completed]
    default = ids.index(st_session.results_id) if st_session.results_id in ids else 0
    chosen = st.selectbox(
        "Interview",
        ids,
        index=default,
        format_func=lambda sid: next(
            f"{CATEGORY_LABELS[s.category.value]} · {s.role_title} · {s.started_at:%b %d, %Y}"
            for s in completed
            if s.id == sid
        ),
    )
    session = engine.get(chosen)
    if session:
        render_feedback(session)


def render_dashboard(user_present: bool) -> None:
    if not user_present:
        st.info("Enter your name in the sidebar to see your dashboard.")
        return

    engine = get_engine()
    stats = engine.stats()

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Total interviews", stats.total_interviews)
        st.caption(f"{stats.completed_interviews} completed")
    with c2:
        st.metric("Average score", f"{stats.average_score}%")
    with c3:
        st.markdown("**By category**")
        for category, count in stats.category_breakdown.items():
            st.markdown(f"- {category.label}: {count}")

    st.divider()
    st.subheader("Recent activity")
    if not stats.recent_activity:
        st.caption("No interviews yet.")
    for s in stats.recent_activity:
        cols = st.columns([4, 1, 1, 1])
        with cols[0]:
            st.markdown(
                f"**{s.role_title}** · {CATEGORY_LABELS[s.category.value]}  \n"
                f"{s.started_at:%b %d, %Y}"
            )
        with cols[1]:
            st.markdown(f"{s.score}%" if s.is_completed else "_In progress_")
        with cols[2]:
            if s.is_completed:
                if st.button("Feedback", key=f"fb_{s.id}"):
                    st_session.results_id = s.id
                    st.toast("Open the Results tab to read it.")
            elif st.button("Continue", key=f"cont_{s.id}"):
                resume_interview(s.id)
                st.rerun()
        with cols[3]:
            if st.button("Delete", key=f"del_{s.id}"):
                run(engine.delete, s.id)
                if st_session.active_id == s.id:
                    st_session.active_id = None
                st.rerun()


# ---------------------------
# SIDEBAR
# ---------------------------
with st.sidebar:
    st.markdown("# Interview Practice")
    st_session.display_name = st.text_input(
        "Your name",
        value=st_session.display_name,
        help="Only used to greet you. Nothing is sent anywhere.",
    ).strip()
    user_present = bool(st_session.display_name)
    if user_present:
        st.caption(f"Welcome back, {st_session.display_name}")

    st.divider()
    st.caption(
        f"{SETTINGS.questions_per_session} questions per interview · "
        f"{format_countdown(SETTINGS.seconds_per_question)} per question"
    )
    if get_engine().persistence_degraded:
        st.warning("Saving is unavailable; interviews are kept for this run only.")


# ---------------------------
# TABS
# ---------------------------
practice_tab, results_tab, dashboard_tab, about_tab = st.tabs(
    ["Practice", "Results", "Dashboard", "About"]
)

with practice_tab:
    render_practice(user_present)

with results_tab:
    render_results(user_present)

with dashboard_tab:
    render_dashboard(user_present)

with about_tab:
    st.subheader("About this app")
    st.markdown(
        "Pick a category and a job title, answer each question against the clock, "
        "then review your score and feedback.\n\n"
        "- **Technical**: language and framework fundamentals\n"
        "- **Behavioral**: past experience, STAR-style answers\n"
        "- **System design**: architecture and scaling\n\n"
        "Scores and feedback are generated by a practice placeholder, not by a "
        "reviewer reading your answers."
    )

st.divider()
st.caption(
    "Privacy tip: Do not paste sensitive personal data. Interviews are saved locally."
)

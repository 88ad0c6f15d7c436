"""
Creator Burnout Assessment — Streamlit Frontend
================================================
Renders the four quiz stages on top of QuizSession:

  - Welcome       — pitch and "Start Free Assessment"
  - Quiz          — progress bar, slider / option buttons, Back / Next
  - Results       — score, band, #1 time waster, time leaks, email capture
  - Confirmation  — next steps

A second sidebar page shows lead analytics from the SQLite LeadStore.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from creator_burnout.capture import LeadStore
from creator_burnout.core import (
    AssessmentError,
    CaptureFailed,
    Explainer,
    QuestionKind,
    QuizSession,
    Stage,
)
from creator_burnout.dashboard import LeadAnalytics
from creator_burnout.utils.helpers import apply_log_level, load_config

# ---------------------------------------------------------------------------
# Page configuration
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Discover Your Burnout Score",
    page_icon="🔥",
    layout="centered",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
    .main-title {
        text-align: center;
        padding: 1rem 0;
        font-size: 2.2rem;
        font-weight: 700;
    }
    .score-card {
        padding: 1.5rem;
        border-radius: 12px;
        text-align: center;
        margin: 0.5rem 0;
        color: white;
        font-weight: 600;
    }
    .band-moderate { background: linear-gradient(135deg, #27ae60, #2ecc71); }
    .band-high { background: linear-gradient(135deg, #f39c12, #e67e22); }
    .band-critical { background: linear-gradient(135deg, #e74c3c, #c0392b); }
    .waster-box {
        background: #fdecea;
        border: 1px solid #e74c3c;
        border-radius: 12px;
        padding: 1rem 1.2rem;
        margin: 1rem 0;
    }
</style>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _band_class(score: int) -> str:
    if score > 70:
        return "band-critical"
    if score > 50:
        return "band-high"
    return "band-moderate"


def _severity_icon(level: int) -> str:
    return {2: "🔴", 1: "🟡"}.get(level, "🟢")


@st.cache_resource
def load_services():
    """Config, shared lead store and explainer (cached across reruns)."""
    config = load_config()
    apply_log_level(config)
    store = LeadStore.from_config(config)
    return config, store, Explainer()


def _new_session() -> QuizSession:
    config, store, _ = load_services()
    return QuizSession(store, config)


# ---------------------------------------------------------------------------
# Session state initialisation
# ---------------------------------------------------------------------------
if "quiz" not in st.session_state:
    st.session_state.quiz = _new_session()
if "review_question" not in st.session_state:
    st.session_state.review_question = None

config, store, explainer = load_services()
quiz: QuizSession = st.session_state.quiz

page = st.sidebar.radio("Go to", ["Assessment", "Lead Dashboard"], label_visibility="collapsed")
st.sidebar.divider()
if st.sidebar.button("Restart assessment"):
    st.session_state.quiz = _new_session()
    st.session_state.review_question = None
    st.rerun()


# =====================================================================
# Stage renderers
# =====================================================================

def render_welcome():
    st.markdown('<h1 class="main-title">Discover Your Burnout Score</h1>', unsafe_allow_html=True)
    st.markdown(
        "<p style='text-align:center; font-size:1.2rem;'>"
        "Find your #1 time waster killing your creativity in 10 minutes"
        "</p>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "- **Identify Time Leaks** — pinpoint exactly where your hours disappear\n"
        "- **Set Smart Boundaries** — get actionable tactics to reclaim your time\n"
        "- **Optimize Repurposing** — create once, publish everywhere efficiently"
    )
    if st.button("Start Free Assessment ›", type="primary", use_container_width=True):
        quiz.start()
        st.rerun()
    st.caption("⏱️ Takes 10 minutes • No credit card required")


def render_quiz():
    review = st.session_state.review_question
    question = review or quiz.current_question
    position, total, percent = quiz.progress()
    if review is not None:
        position = quiz.catalog.index(review) + 1
        percent = round(position / total * 100)

    st.markdown(f"**Question {position} of {total}** · {percent}%")
    st.progress(percent / 100)
    st.subheader(question.prompt)

    current = quiz.responses.get(question.id)
    if question.kind is QuestionKind.RANGE:
        value = st.slider(
            question.prompt,
            min_value=question.min,
            max_value=question.max,
            value=current if current is not None else question.default_value,
            label_visibility="collapsed",
            key=f"slider_{question.id}",
        )
        st.caption("  ·  ".join(question.labels))
    else:
        options = list(question.options)
        value = st.radio(
            question.prompt,
            options,
            index=options.index(current) if current in options else None,
            label_visibility="collapsed",
            key=f"radio_{question.id}",
        )

    is_last = position == total
    col_back, col_next = st.columns(2)
    with col_back:
        # One step back only: the current question is derived from the answers.
        back_disabled = review is not None or quiz.current_question_index() == 0
        if st.button("Back", use_container_width=True, disabled=back_disabled):
            try:
                st.session_state.review_question = quiz.go_back()
            except AssessmentError as e:
                st.warning(str(e))
            st.rerun()
    with col_next:
        label = "See My Results" if is_last and review is None else "Next ›"
        if st.button(label, type="primary", use_container_width=True, disabled=value is None):
            try:
                quiz.record_answer(question.id, value)
                st.session_state.review_question = None
                if is_last and review is None:
                    quiz.request_results()
                else:
                    quiz.advance()
            except AssessmentError as e:
                st.error(str(e))
            else:
                st.rerun()


def render_results():
    result = quiz.result
    explanation = explainer.explain(result)

    st.markdown(
        f'<div class="score-card {_band_class(result.score)}">'
        f'<p style="margin:0">YOUR BURNOUT SCORE</p>'
        f'<h1 style="margin:0">{result.score}/100</h1>'
        f'<p style="margin:0.3rem 0 0 0">{result.score_band}</p>'
        f'</div>',
        unsafe_allow_html=True,
    )

    st.markdown(
        f'<div class="waster-box"><b>🎯 YOUR #1 TIME WASTER</b>'
        f'<h3 style="margin:0.3rem 0">{result.top_factor}</h3>'
        f'This is where your creativity is bleeding away. '
        f'Fixing this alone saves 8-12 hours/week.</div>',
        unsafe_allow_html=True,
    )

    st.markdown("**CRITICAL TIME LEAKS IDENTIFIED:**")
    for dim, severity in result.factor_diagnostics.items():
        detail = result.diagnostic_details.get(dim, severity.value)
        st.markdown(f"{_severity_icon(severity.level)} **{dim.title()}** — {detail}")

    col_h, col_p, col_r = st.columns(3)
    col_h.metric("Daily hours", f"{result.stats['daily_hours']}h")
    col_p.metric("Platforms", result.stats["platform_count"])
    col_r.metric("Revenue streams", result.stats["revenue_streams"])

    with st.expander("Factor breakdown"):
        for name, value in explanation["factor_breakdown"]:
            st.markdown(f"- **{name}**: {value}")

    st.divider()
    st.subheader("Get Your Personalized Action Plan")
    st.markdown("Enter your email to receive:")
    for item in explanation["action_plan"]:
        st.markdown(f"- ✓ {item}")

    email = st.text_input("Email", placeholder="your@email.com", label_visibility="collapsed")
    if st.button("Send Me My Action Plan 🚀", type="primary", use_container_width=True):
        try:
            quiz.submit_contact(email)
        except CaptureFailed as e:
            st.error(f"{e}")
        except AssessmentError as e:
            st.warning(str(e))
        else:
            st.rerun()
    st.caption("No spam, just actionable insights for creators. Unsubscribe anytime.")

    st.download_button(
        label="Download Result (JSON)",
        data=result.to_json(indent=2),
        file_name=f"burnout_assessment_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json",
        mime="application/json",
    )
    st.markdown(explanation["disclaimer"])


def render_confirmation():
    st.markdown('<h1 class="main-title">✅ Check Your Email!</h1>', unsafe_allow_html=True)
    st.markdown(
        f"Your personalized action plan has been sent to **{quiz.contact_id}**"
    )
    st.subheader("What's Next?")
    for i, step in enumerate(explainer.explain(quiz.result)["next_steps"], start=1):
        st.markdown(f"**{i}. {step['title']}**  \n{step['detail']}")
    st.caption("Questions? Reply directly to the email. We read every message. 💙")


# =====================================================================
# Page: Assessment
# =====================================================================
if page == "Assessment":
    {
        Stage.WELCOME: render_welcome,
        Stage.QUIZ: render_quiz,
        Stage.RESULTS: render_results,
        Stage.CONFIRMATION: render_confirmation,
    }[quiz.stage]()


# =====================================================================
# Page: Lead Dashboard
# =====================================================================
elif page == "Lead Dashboard":
    st.markdown('<h1 class="main-title">Lead Dashboard</h1>', unsafe_allow_html=True)
    analytics = LeadAnalytics(store, config)
    days = st.slider("Period (days)", 1, 365, analytics.default_days)
    overview = analytics.get_overview(days=days)
    stats = overview["stats"]

    if stats["total_leads"] == 0:
        st.info("No leads captured in this period.")
    else:
        summary = overview["score_summary"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Leads", stats["total_leads"])
        c2.metric("Mean score", summary["mean"])
        c3.metric("Median", summary["median"])
        c4.metric("90th pct", summary["p90"])

        st.subheader("#1 Time Wasters")
        st.bar_chart(overview["top_factor_distribution"])

        st.subheader("Alerts")
        for alert in overview["alerts"]:
            st.markdown(f"- **{alert['message']}** {alert['suggestion']}")

        col_csv, col_json = st.columns(2)
        col_csv.download_button(
            "Download CSV", analytics.export_csv(days=days),
            file_name="leads.csv", mime="text/csv",
        )
        col_json.download_button(
            "Download Report (JSON)", analytics.export_report(days=days),
            file_name="lead_report.json", mime="application/json",
        )

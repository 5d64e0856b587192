# app.py - AI Test Designer: user story in, test cases + Cucumber/Java skeletons out
# Run:
#   pip install -e .
#   echo "OPENAI_API_KEY=sk-..." > .env
#   streamlit run app.py

import logging
from html import escape
import streamlit as st

import settings
import ui_state
from models import DetailLevel, TestFocus
from generation import generate, GenerationError
from sections import split_sections
from render import present_section
from exporters import export_for
from generate_pdf import build_pdf

st.set_page_config(page_title="AI Test Designer", page_icon="🧪", layout="wide")

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("app")

EXPORT_LABELS = {
    "csv": "⬇️ Export CSV",
    "feature": "⬇️ Download .feature",
    "java": "⬇️ Download .java",
}

if "app_state" not in st.session_state:
    st.session_state.app_state = ui_state.initial_state()


# ======================= CSS =======================
st.markdown("""
<style>
.stApp { background: #111827; color: #e5e7eb; }

/* title pill */
.mock-title {
  margin: 8px 0 22px 0; font-weight: 800; font-size: 28px; color: #fff;
}
.mock-title span { color: #818cf8; }

.panel-label { font-weight: 700; font-size: 18px; margin: 0 0 10px 0; }

/* test case table: cells keep the model's <br> line breaks */
.tc-table-wrap { overflow-x: auto; border: 1px solid #374151; border-radius: 8px; }
.tc-table { min-width: 100%; border-collapse: collapse; font-size: 14px; }
.tc-table th {
  background: #1f2937; color: #d1d5db; text-transform: uppercase;
  font-size: 12px; text-align: left; padding: 10px 12px;
}
.tc-table td { color: #9ca3af; vertical-align: top; padding: 12px; border-top: 1px solid #374151; }
.tc-table tr:hover td { background: rgba(31, 41, 55, .5); }

.failed-box {
  background: rgba(127, 29, 29, .2); color: #f87171; border-radius: 10px;
  padding: 24px; text-align: center;
}
.failed-box h3 { color: #f87171; margin-bottom: 6px; }
.empty-box { color: #6b7280; text-align: center; padding: 80px 0; }
</style>
""", unsafe_allow_html=True)


# ======================= state transitions =======================
def _on_field_change(name: str):
    st.session_state.app_state = ui_state.change_field(
        st.session_state.app_state, name, st.session_state[name]
    )


def _on_submit():
    st.session_state.app_state = ui_state.submit(st.session_state.app_state)


def _run_generation():
    state = st.session_state.app_state
    with st.spinner("Generating test cases... This may take a moment."):
        try:
            text = generate(state.form)
        except GenerationError as e:
            logger.warning("Generation failed: %s", e)
            st.session_state.app_state = ui_state.fail(state, str(e))
        else:
            logger.info("Generation finished (%d chars)", len(text))
            st.session_state.app_state = ui_state.succeed(state, text)
    st.rerun()


# ======================= output =======================
def render_output(state):
    sections = split_sections(state.output)

    with st.expander("📋 Copy All"):
        st.code(state.output, language="markdown")
    st.download_button("📄 Download PDF", data=build_pdf(state.form, sections),
                       file_name=settings.PDF_FILE_NAME, mime="application/pdf", key="dl_pdf")

    for i, section in enumerate(sections):
        view = present_section(section)
        title_col, btn_col = st.columns([4, 1])
        title_col.subheader(view.title)
        download = export_for(section, view)
        if download:
            btn_col.download_button(EXPORT_LABELS[view.export], data=download.data,
                                    file_name=download.file_name, mime=download.mime,
                                    key=f"dl_{i}_{download.file_name}")

        if view.kind == "code":
            st.code(view.body, language=view.language)
        else:
            st.markdown(view.body, unsafe_allow_html=True)


# ======================= UI =======================
st.markdown('<div class="mock-title"><span>✨</span> AI Test Designer</div>', unsafe_allow_html=True)

state = st.session_state.app_state
form = state.form
input_col, output_col = st.columns(2, gap="large")

with input_col:
    st.markdown('<div class="panel-label">Input Details</div>', unsafe_allow_html=True)
    st.text_area("User Story & Acceptance Criteria", value=form.user_story, key="user_story",
                 height=220, on_change=_on_field_change, args=("user_story",))
    st.text_input("System Under Test URL (Optional)", value=form.system_url, key="system_url",
                  on_change=_on_field_change, args=("system_url",))

    focus_col, level_col = st.columns(2)
    focus_options = [f.value for f in TestFocus]
    focus_col.selectbox("Test Focus", focus_options, index=focus_options.index(form.test_focus.value),
                        key="test_focus", on_change=_on_field_change, args=("test_focus",))
    level_options = [d.value for d in DetailLevel]
    level_col.selectbox("Detail Level", level_options, index=level_options.index(form.detail_level.value),
                        format_func=str.capitalize,
                        key="detail_level", on_change=_on_field_change, args=("detail_level",))

    st.button("Generating..." if state.is_loading else "✨ Generate Test Cases",
              type="primary", disabled=state.is_loading, on_click=_on_submit)

with output_col:
    st.markdown('<div class="panel-label">Generated Output</div>', unsafe_allow_html=True)
    if state.is_loading:
        _run_generation()
    elif state.error:
        st.markdown(
            f'<div class="failed-box"><h3>Generation Failed</h3><p>{escape(state.error)}</p></div>',
            unsafe_allow_html=True,
        )
    elif state.output:
        render_output(state)
    else:
        st.markdown(
            '<div class="empty-box"><h3>AI Test Designer</h3>'
            '<p>Your generated test cases will appear here.</p></div>',
            unsafe_allow_html=True,
        )

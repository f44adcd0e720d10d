import logging

import streamlit as st

from bondcheck import config
from bondcheck.errors import MissingInputs, UnsupportedFormat
from bondcheck.matcher import filter_by_number, summarise
from bondcheck.report import (
    bonds_frame,
    build_match_report,
    matches_frame,
    sample_bonds_workbook,
    sample_draw_result_text,
)
from bondcheck.session import CheckerSession

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("bondcheck.app")

# =============================================================
# CONFIG (page)
# =============================================================
PAGE_TITLE = "Prize Bond Checker"
PAGE_ICON = "🎟️"
PREVIEW_HEIGHT = 300

OWN_ERROR_MSG = "Error reading file. Please ensure it's a valid Excel or CSV file."
WINNING_ERROR_MSG = "Error reading file. Please ensure it's a valid text, PDF, Excel, or CSV file."

# =============================================================
# STREAMLIT PAGE
# =============================================================
st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")

# --------- MODERN UI / CSS ---------
st.markdown(
    """
    <style>
    body { background: linear-gradient(135deg, #ECFDF5 0%, #FFFFFF 50%, #EFF6FF 100%); }
    div.block-container { padding-top: 2rem; padding-bottom: 3rem; }
    .hero-box {
        background: rgba(255,255,255,0.70);
        padding: 24px 22px;
        border-radius: 16px;
        border: 1px solid rgba(0,0,0,0.07);
        box-shadow: 0 12px 30px rgba(0,0,0,0.06);
        animation: fadeIn 700ms ease;
    }
    .hero-title { margin: 0 0 6px 0; font-weight: 800; }
    .hero-sub  { margin: 0; color: #475569; }
    .ui-card {
        background: #FFFFFF;
        padding: 18px 16px;
        border-radius: 14px;
        border: 1px solid rgba(0,0,0,0.07);
        box-shadow: 0 8px 22px rgba(0,0,0,0.08);
        animation: fadeInUp 600ms ease;
    }
    .chip {
        display:inline-flex; align-items:center; gap:8px;
        border-radius:999px; padding:6px 12px;
        background:#ECFDF5; color:#065F46; font-size:12.5px;
        border:1px solid rgba(6,95,70,0.18);
        margin-right:6px;
    }
    .stButton>button {
        background:#059669 !important; color:#fff !important; border:none !important;
        border-radius:10px !important; padding:10px 22px !important; font-size:16px !important;
        box-shadow: 0 10px 24px rgba(5,150,105,0.25);
    }
    .stButton>button:disabled { background:#9CA3AF !important; box-shadow:none; }
    .tiny { font-size:12.5px; color:#6B7280; }
    @keyframes fadeIn   { from {opacity:0} to {opacity:1} }
    @keyframes fadeInUp { from {opacity:0; transform:translateY(10px)} to {opacity:1; transform:translateY(0)} }
    </style>
    """,
    unsafe_allow_html=True,
)

# =============================================================
# SESSION STATE
# =============================================================
if "checker" not in st.session_state:
    st.session_state["checker"] = CheckerSession()
    st.session_state["notice_own"] = None
    st.session_state["notice_winning"] = None

checker: CheckerSession = st.session_state["checker"]


# =============================================================
# CACHED DOWNLOADS (built once per distinct input, not per rerun)
# =============================================================
@st.cache_data
def cached_sample_bonds() -> bytes:
    return sample_bonds_workbook()


@st.cache_data
def cached_sample_draw() -> bytes:
    return sample_draw_result_text()


@st.cache_data(max_entries=8)
def cached_match_report(own_bonds, winning_bonds, matches) -> bytes:
    return build_match_report(own_bonds, winning_bonds, matches)


def _notice_for(result, generic_msg: str) -> str:
    # only the category of the problem is shown; details go to the log
    if isinstance(result.error, UnsupportedFormat):
        return f"Unsupported file format: '{result.file_name}'. {generic_msg}"
    return generic_msg


def on_own_upload():
    f = st.session_state.get("own_file")
    if f is None:
        return
    result = checker.load_own_bonds(f.name, f.getvalue())
    st.session_state["notice_own"] = None if result.ok else _notice_for(result, OWN_ERROR_MSG)


def on_winning_upload():
    f = st.session_state.get("winning_file")
    if f is None:
        return
    result = checker.load_winning_bonds(f.name, f.getvalue())
    st.session_state["notice_winning"] = None if result.ok else _notice_for(result, WINNING_ERROR_MSG)


def render_preview(bonds, label: str, key: str):
    with st.expander(f"🔎 Preview {label}"):
        query = st.text_input("Search bond number…", key=key, label_visibility="collapsed",
                              placeholder="Search bond number…")
        shown = filter_by_number(bonds, query)
        st.caption(f"Showing {len(shown)} of {len(bonds)}")
        st.dataframe(bonds_frame(shown), use_container_width=True, hide_index=True, height=PREVIEW_HEIGHT)


# =============================================================
# HERO
# =============================================================
st.markdown(
    f"""
    <div class="hero-box">
        <h1 class="hero-title">{PAGE_ICON} {PAGE_TITLE}</h1>
        <p class="hero-sub">
            Upload your bond list + the draw result → we will find every one of your bonds
            that appears in the winning list.
        </p>
    </div>
    """,
    unsafe_allow_html=True,
)
st.markdown("<br>", unsafe_allow_html=True)

# =============================================================
# SAMPLE TEMPLATES
# =============================================================
with st.expander("📋 Sample Templates"):
    st.caption("Not sure how to format your files? Download these samples to see the expected format.")
    tpl_a, tpl_b = st.columns(2)
    with tpl_a:
        st.download_button(
            "⬇️ Sample bond list (.xlsx)",
            data=cached_sample_bonds(),
            file_name=config.SAMPLE_BONDS_FILE_NAME,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            use_container_width=True,
        )
    with tpl_b:
        st.download_button(
            "⬇️ Sample draw result (.txt)",
            data=cached_sample_draw(),
            file_name=config.SAMPLE_DRAW_FILE_NAME,
            mime="text/plain",
            use_container_width=True,
        )

# =============================================================
# LAYOUT (My bonds • Winning bonds)
# =============================================================
left, right = st.columns(2, gap="large")

with left:
    st.markdown("<div class='ui-card'>", unsafe_allow_html=True)
    st.subheader("📄 My Prize Bonds")
    st.caption("Excel or CSV file with your bond numbers, one per cell.")
    st.file_uploader(
        "My bonds file",
        type=list(config.OWN_BOND_EXTENSIONS),
        key="own_file",
        on_change=on_own_upload,
        label_visibility="collapsed",
    )
    if st.session_state["notice_own"]:
        st.error(st.session_state["notice_own"])
    if checker.own_loaded:
        st.markdown(f"<span class='chip'>✅ {len(checker.own_bonds)} bonds loaded</span>", unsafe_allow_html=True)
        render_preview(checker.own_bonds, "my bonds", "own_search")
    st.markdown("</div>", unsafe_allow_html=True)

with right:
    st.markdown("<div class='ui-card'>", unsafe_allow_html=True)
    st.subheader("🏆 Winning Bonds")
    st.caption("Draw result as text or PDF (6-digit numbers are picked out), or Excel / CSV.")
    st.file_uploader(
        "Winning bonds file",
        type=list(config.WINNING_BOND_EXTENSIONS),
        key="winning_file",
        on_change=on_winning_upload,
        label_visibility="collapsed",
    )
    if st.session_state["notice_winning"]:
        st.error(st.session_state["notice_winning"])
    if checker.winning_loaded:
        st.markdown(f"<span class='chip'>✅ {len(checker.winning_bonds)} winners loaded</span>",
                    unsafe_allow_html=True)
        render_preview(checker.winning_bonds, "winning bonds", "winning_search")
    st.markdown("</div>", unsafe_allow_html=True)

st.markdown("<br>", unsafe_allow_html=True)

# =============================================================
# CTA
# =============================================================
cta_a, cta_b, cta_c = st.columns([0.2, 0.6, 0.2])
with cta_b:
    start = st.button(
        "🔍 Check for Winners",
        use_container_width=True,
        disabled=not (checker.own_loaded and checker.winning_loaded),
    )

# =============================================================
# MAIN ACTION
# =============================================================
if start:
    try:
        with st.spinner("Checking your bonds…"):
            checker.check_matches()
    except MissingInputs as e:
        logger.warning("Check requested without both lists: %s", e)
        st.error(str(e))

# =============================================================
# RESULTS
# =============================================================
if checker.has_checked:
    matches = checker.matches
    if matches:
        st.success(f"🎉 {summarise(matches)}")
        st.dataframe(matches_frame(matches), use_container_width=True, hide_index=True)
    else:
        st.info(summarise(matches))

    st.download_button(
        "⬇️ Download report (.xlsx)",
        data=cached_match_report(checker.own_bonds, checker.winning_bonds, matches),
        file_name=config.REPORT_FILE_NAME,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )

st.caption(
    "Notes: numbers are compared exactly as written, so '012345' and '12345' are different bonds. "
    "From text and PDF draw results only standalone 6-digit numbers are picked up."
)

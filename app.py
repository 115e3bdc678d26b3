import streamlit as st
import asyncio
import html
import logging
from dotenv import load_dotenv

from presentations.api_client import PresentationApiClient
from presentations.config import configure_logging
from presentations.errors import AuthError
from presentations.formatting import format_file_size
from presentations.services.file_filter import CATEGORY_LABELS, Category
from presentations.services.session_gate import SessionGate
from presentations.services.workspace import FileWorkspace, UploadCandidate

load_dotenv()
configure_logging()
logger = logging.getLogger("presentations.app")

st.set_page_config(page_title="Presentation Manager", layout="wide")


def get_gate() -> SessionGate:
    if "api" not in st.session_state:
        st.session_state.api = PresentationApiClient()
    return SessionGate(st.session_state, st.session_state.api)


def inject_css():
    st.html("""
    <style>
    #MainMenu, footer { visibility: hidden; }
    .stApp { background: linear-gradient(135deg, #eff6ff, #eef2ff 50%, #faf5ff); }

    /* ── Cards ── */
    .file-card {
        background: white;
        border-radius: 12px;
        padding: 1.25rem;
        box-shadow: 0 4px 14px rgba(79,70,229,0.08);
        margin-bottom: 0.5rem;
    }
    .file-card h4 { margin: 0; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
    .file-card p { color: #6b7280; font-size: 0.85rem; margin: 0.25rem 0 0; }

    /* ── Hero ── */
    .hero { text-align: center; padding: 4rem 1rem 2rem; }
    .hero h1 { font-weight: 800; color: #1f2937; margin-bottom: 0.5rem; }
    .hero p { color: #4b5563; }
    </style>
    """)


def login_page(gate: SessionGate):
    inject_css()

    st.html("""
    <div class="hero">
        <h1>🔒 Presentation Manager</h1>
        <p>Enter password to continue</p>
    </div>
    """)

    _, col, _ = st.columns([1, 2, 1])
    with col:
        with st.form("login_form"):
            password = st.text_input("Password", type="password", placeholder="Password", label_visibility="collapsed")
            submitted = st.form_submit_button("Login", use_container_width=True, type="primary")

        if submitted:
            st.session_state.login_error = ""
            try:
                with st.spinner(""):
                    asyncio.run(gate.login(password))
                st.rerun()
            except AuthError as e:
                st.session_state.login_error = e.message

        if st.session_state.get("login_error"):
            st.error(st.session_state.login_error)


def upload_section(workspace: FileWorkspace):
    if "uploader_key" not in st.session_state:
        st.session_state.uploader_key = 0

    uploaded_files = st.file_uploader(
        "Click to upload files",
        accept_multiple_files=True,
        key=f"uploader_{st.session_state.uploader_key}",
    )
    if uploaded_files and st.button("Upload Selected Files", type="primary"):
        logger.debug("Upload requested for %d files", len(uploaded_files))
        candidates = [UploadCandidate.from_source(f) for f in uploaded_files]
        with st.spinner("Uploading..."):
            asyncio.run(workspace.upload(candidates))
        # A new key resets the uploader so the same files can be picked again
        st.session_state.uploader_key += 1
        st.rerun()


def file_card(workspace: FileWorkspace, entry):
    st.html(f"""
    <div class="file-card">
        <h4>📄 {html.escape(entry.name)}</h4>
        <p>{format_file_size(entry.size)}</p>
    </div>
    """)
    col_view, col_download, col_del = st.columns([2, 2, 1])
    with col_view:
        st.link_button("👁 View", workspace.view_url(entry.name), use_container_width=True)
    with col_download:
        st.link_button("⬇ Download", workspace.download_url(entry.name), use_container_width=True)
    with col_del:
        if st.button("🗑", key=f"del_{entry.name}", use_container_width=True):
            st.session_state[f"confirm_del_{entry.name}"] = True

    if st.session_state.get(f"confirm_del_{entry.name}", False):
        st.warning("Delete this presentation?")
        col_y, col_n = st.columns(2)
        with col_y:
            if st.button("Yes, Delete", key=f"yes_{entry.name}", type="primary"):
                del st.session_state[f"confirm_del_{entry.name}"]
                with st.spinner("Deleting..."):
                    asyncio.run(workspace.delete(entry.name, confirm=lambda _: True))
                st.rerun()
        with col_n:
            if st.button("Cancel", key=f"cancel_{entry.name}"):
                del st.session_state[f"confirm_del_{entry.name}"]
                st.rerun()


def main_app_view(gate: SessionGate):
    inject_css()

    if "workspace" not in st.session_state:
        st.session_state.workspace = FileWorkspace(gate.api)
        with st.spinner("Loading..."):
            asyncio.run(st.session_state.workspace.refresh())
    workspace: FileWorkspace = st.session_state.workspace

    col_title, col_logout = st.columns([5, 1])
    with col_title:
        st.title("📁 My Presentations")
    with col_logout:
        if st.button("Logout", use_container_width=True):
            gate.logout()
            logger.debug("Clearing session state after logout")
            for key in [k for k in st.session_state.keys() if k != "api"]:
                del st.session_state[key]
            st.rerun()

    upload_section(workspace)

    for notice in workspace.take_notices():
        st.warning(notice)
    if workspace.error:
        st.error(workspace.error)
        workspace.error = ""

    col_search, col_filter = st.columns([4, 1])
    with col_search:
        workspace.search_term = st.text_input("Search", placeholder="Search...", label_visibility="collapsed")
    with col_filter:
        workspace.category = st.selectbox(
            "Filter",
            list(CATEGORY_LABELS),
            format_func=CATEGORY_LABELS.get,
            label_visibility="collapsed",
        ) or Category.ALL

    if workspace.loading:
        st.write("Loading...")
        return
    if not workspace.files:
        st.info("No files uploaded yet.")
        return

    visible = workspace.visible_files()
    if not visible:
        st.info("No files match the current search.")
        return

    columns = st.columns(3)
    for idx, entry in enumerate(visible):
        with columns[idx % 3]:
            file_card(workspace, entry)


if __name__ == "__main__":
    gate = get_gate()
    if not gate.is_authenticated:
        login_page(gate)
    else:
        main_app_view(gate)

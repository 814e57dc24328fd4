"""Streamlit portfolio page."""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st
import pandas as pd

from folio.config import Settings
from folio.github.store import NotImported, load_profile, load_repos, repo_summaries, top_languages
from folio.profile import load_profile_data
from folio.scanner.detector import WorkspaceScanner

# Page config
st.set_page_config(
    page_title="Portfolio",
    page_icon="💼",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS
st.markdown("""
<style>
    .skill-chip {
        display: inline-block;
        padding: 0.15rem 0.6rem;
        margin: 0.15rem;
        border-radius: 1rem;
        background-color: rgba(100, 108, 255, 0.12);
        font-size: 0.85rem;
    }
</style>
""", unsafe_allow_html=True)

settings = Settings.from_env()


def get_repos_data() -> pd.DataFrame:
    """Load imported repos as a DataFrame, newest first."""
    return pd.DataFrame(repo_summaries(load_repos(settings.data_dir)))


def get_local_projects_data() -> pd.DataFrame:
    """Scan the workspace and return one row per project."""
    scanner = WorkspaceScanner(settings.workspace_dir, exclude=settings.exclude)
    return pd.DataFrame([p.to_dict() for p in scanner.scan()])


def render_header(profile: dict):
    cols = st.columns([1, 4])
    with cols[0]:
        if profile.get("avatar"):
            st.image(profile["avatar"], width=140)
    with cols[1]:
        st.title(profile["name"])
        st.subheader(profile["title"])
        links = []
        if profile.get("linkedin"):
            links.append(f"[LinkedIn]({profile['linkedin']})")
        if profile.get("cv"):
            links.append(f"[CV]({profile['cv']})")
        if links:
            st.markdown(" · ".join(links))

    st.write(profile["summary"])
    chips = "".join(f'<span class="skill-chip">{s}</span>' for s in profile["skills"])
    st.markdown(chips, unsafe_allow_html=True)


def render_experience(profile: dict):
    st.header("💼 Experience")
    for job in profile["experience"]:
        st.markdown(f"**{job['role']}** · {job['company']}")
        st.caption(job["period"])
        for h in job["highlights"]:
            st.markdown(f"- {h}")

    st.header("🎓 Education")
    for edu in profile["education"]:
        with st.expander(f"{edu['school']} ({edu['period']})"):
            st.markdown(f"**{edu['degree']}**")
            for d in edu["details"]:
                st.markdown(f"- {d}")


def render_projects(profile: dict):
    st.header("🛠️ Projects")
    cols = st.columns(3)
    for i, project in enumerate(profile["projects"]):
        with cols[i % 3]:
            with st.container(border=True):
                st.markdown(f"**{project['name']}**")
                st.caption(project["description"])
                st.markdown(" ".join(f"`{t}`" for t in project["technologies"]))

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("📜 Certifications")
        for c in profile["certifications"]:
            st.markdown(f"- {c}")
    with col2:
        st.subheader("🏆 Achievements")
        for a in profile["achievements"]:
            st.markdown(f"- {a}")


def render_github():
    st.header("🐙 GitHub")
    try:
        gh = load_profile(settings.data_dir)
        df = get_repos_data()
        languages = top_languages(load_repos(settings.data_dir))
    except NotImported:
        st.info("No GitHub data yet. Run `folio import-github` first.")
        return

    col1, col2, col3 = st.columns(3)
    col1.metric("Public repos", gh.get("public_repos", len(df)))
    col2.metric("Followers", gh.get("followers", 0))
    col3.metric("Stars", int(df["stars"].sum()) if not df.empty else 0)

    if languages:
        st.subheader("Top Languages")
        lang_df = pd.DataFrame(languages).set_index("language")
        st.bar_chart(lang_df["count"])

    if not df.empty:
        st.subheader("Recently Updated")
        st.dataframe(
            df[["name", "language", "stars", "forks", "days_inactive", "description"]],
            use_container_width=True,
            hide_index=True,
        )


def render_local_projects():
    st.header("🗂️ Local Projects")
    try:
        df = get_local_projects_data()
    except OSError as e:
        st.error(f"Cannot scan {settings.workspace_dir}: {e}")
        return

    if df.empty:
        st.info(f"No projects found in {settings.workspace_dir}")
        return

    if "docker" not in df.columns:
        df["docker"] = False
    df["docker"] = df["docker"].fillna(False).astype(bool)

    st.caption(f"{len(df)} projects in {settings.workspace_dir}")
    st.dataframe(df[["name", "type", "docker", "readme", "path"]], use_container_width=True, hide_index=True)

    st.subheader("Projects by Type")
    st.bar_chart(df["type"].value_counts())


def main():
    profile = load_profile_data(settings)

    with st.sidebar:
        st.header("📑 Sections")
        section = st.radio("Go to", ["About", "Experience", "Projects", "GitHub", "Local Projects"])

    if section == "About":
        render_header(profile)
    elif section == "Experience":
        render_experience(profile)
    elif section == "Projects":
        render_projects(profile)
    elif section == "GitHub":
        render_github()
    else:
        render_local_projects()


if __name__ == "__main__":
    main()

"""Streamlit application for WildScan."""

import streamlit as st

from wildscan.analysis.models import AnalysisResult
from wildscan.analysis.pipeline import analyze_image, get_gemini_client
from wildscan.config import get_config
from wildscan.logging_config import setup_logging_from_config
from wildscan.presentation.icons import icon_for_animal, icon_for_plant


def main() -> None:
    import subprocess
    import sys
    subprocess.run([sys.executable, "-m", "streamlit", "run", __file__, *sys.argv[1:]], check=True)


def check_gemini_available() -> tuple[bool, str]:
    """Check that the Gemini SDK and API key are configured. Returns (ok, error_message)."""
    try:
        get_gemini_client()
        return True, ""
    except ImportError:
        return False, "google-genai package required. Install with: pip install google-genai"
    except ValueError as e:
        return False, str(e)


def format_population(value) -> str:
    if value is None:
        return "unknown"
    if value >= 1_000_000_000:
        return f"{value / 1_000_000_000:.1f} billion"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f} million"
    return f"{int(value):,}"


def render_result(result: AnalysisResult) -> None:
    if result.is_empty:
        st.info("No animals or plants were detected in this image.")
        return

    tab_animals, tab_plants = st.tabs([f"Animals ({len(result.animals)})", f"Plants ({len(result.plants)})"])
    with tab_animals:
        if not result.animals:
            st.write("No animals detected.")
        for animal in result.animals:
            with st.container(border=True):
                st.markdown(f"### {icon_for_animal(animal.species)} {animal.species}")
                c1, c2, c3 = st.columns(3)
                c1.metric("Count", animal.count)
                if animal.carnivore is None:
                    c2.metric("Diet", "unknown")
                else:
                    c2.metric("Diet", "Carnivore" if animal.carnivore else "Not carnivore")
                c3.metric("World population", format_population(animal.world_population))
                if animal.origin:
                    st.caption(f"Origin: {animal.origin}")
    with tab_plants:
        if not result.plants:
            st.write("No plants detected.")
        for plant in result.plants:
            with st.container(border=True):
                st.markdown(f"### {icon_for_plant(plant.species)} {plant.species}")
                st.metric("Count", plant.count)
                if plant.origin:
                    st.caption(f"Origin: {plant.origin}")


def run_app() -> None:
    st.set_page_config(page_title="WildScan", page_icon="\U0001f43e")
    st.title("WildScan")
    st.caption("Animals and plants in a photo, identified with Gemini")

    gemini_ok, gemini_error = check_gemini_available()
    if not gemini_ok:
        st.error(f"**Gemini is required.** {gemini_error}")
        return

    analysis_config = get_config().get("analysis", {})
    source = st.radio("Image source", ["Upload", "Camera"], horizontal=True)
    if source == "Upload":
        image = st.file_uploader("Choose an image", type=analysis_config.get("image_types"))
    else:
        image = st.camera_input("Take a photo")

    if st.button("Analyze image", type="primary", disabled=image is None) and image is not None:
        with st.spinner("Analyzing image..."):
            outcome = analyze_image(image.getvalue(), image.type or "image/jpeg")
        if outcome.ok:
            st.session_state["result"] = outcome.result
        else:
            st.error(outcome.failure.message)
            if outcome.raw_reply:
                with st.expander("Raw model reply"):
                    st.text(outcome.raw_reply)

    # Keep showing the last successful analysis after a failed one
    if image is not None:
        st.image(image)
    result = st.session_state.get("result")
    if result is not None:
        st.subheader("Results")
        render_result(result)


if __name__ == "__main__":
    setup_logging_from_config()
    run_app()

"""Streamlit frontend for Meeting Point Optimiser."""
import streamlit as st
import pandas as pd
import requests
from typing import Dict, Any, Optional
import os
from app.frontend.api_errors import error_detail

st.set_page_config(
    page_title="Meeting Point Optimiser",
    page_icon="📍",
    layout="wide"
)

# API base URL - can be set via environment variable or Streamlit secrets
API_BASE_URL = os.getenv("API_BASE_URL")
if not API_BASE_URL:
    try:
        API_BASE_URL = st.secrets.get("API_BASE_URL", "http://localhost:8000/api")
    except (AttributeError, FileNotFoundError, KeyError):
        API_BASE_URL = "http://localhost:8000/api"

st.title("📍 Meeting Point Optimiser")


def api_request(endpoint: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """POST to the API and return the JSON body."""
    url = f"{API_BASE_URL}{endpoint}"
    try:
        response = requests.post(url, json=data)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as e:
        try:
            detail = error_detail(e.response.json(), str(e))
        except ValueError:
            detail = str(e)
        st.error(f"API request failed: {detail}")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"API request failed: {str(e)}")
        return None


with st.form("meeting_point_form"):
    cities_input = st.text_input(
        "Participant cities (comma-separated, 3 to 10) *",
        placeholder="Milan, Rome, Turin, Bologna"
    )
    submitted = st.form_submit_button("Find Meeting Point")

if submitted:
    cities = [city.strip() for city in cities_input.split(",") if city.strip()]
    if len(cities) < 3 or len(cities) > 10:
        st.error("Insert cities (min 3 to max 10)")
    else:
        with st.spinner("Computing distances..."):
            result = api_request("/meeting-point", {"cities": cities})

        if result:
            metrics = result["metrics"]
            st.success(f"Optimal location: {result['optimal_location']}")

            col1, col2, col3, col4 = st.columns(4)
            col1.metric("Total Distance", f"{result['total_distance_km']:,.1f} km")
            col2.metric("Cumulative Time", f"{metrics['cumulative_time_hours']:.3f} h")
            col3.metric("Average Time", f"{metrics['average_time_hours']:.3f} h")
            col4.metric("CO2 Saved", f"{metrics['co2_saved_kg']:.3f} kg")

            st.subheader("Per-Participant Travel")
            participants_df = pd.DataFrame([
                {
                    "City": p["city"].capitalize(),
                    "Distance (km)": p["distance_km"],
                    "Time (h)": p["time_hours"]
                }
                for p in result["participants"]
            ])
            st.dataframe(participants_df, use_container_width=True)

            st.subheader("Pairwise Distances")
            distances_df = pd.DataFrame([
                {"Path": d["path"], "Distance (km)": d["distance_km"]}
                for d in result["distances"]
            ])
            st.dataframe(distances_df, use_container_width=True)

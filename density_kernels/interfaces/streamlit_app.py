"""
Streamlit web interface for the density kernels toolkit.

Interactive UI with tabs for:
- Kernel shapes on a shared grid
- Point evaluation of a single kernel
"""

import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from density_kernels.core.registry import KERNELS, evaluate_kernel, kernel_profile
from density_kernels.utils.constants import DEFAULT_PLOT_POINTS

st.set_page_config(page_title="Density Kernels", layout="wide")

st.title("Density Kernels")
st.markdown("Gaussian, box, triangular, trigonometric and Epanechnikov kernels")

# Sidebar parameters
st.sidebar.header("Kernel Parameters")
kernel = st.sidebar.selectbox("Kernel", list(KERNELS))
mean = st.sidebar.slider("Gaussian Mean", -2.0, 2.0, 0.0)
sigma = st.sidebar.slider("Gaussian Sigma", 0.05, 2.0, 0.5)
normalize = st.sidebar.checkbox("Normalize Gaussian", value=False)
x_range = st.sidebar.slider("Plot Range", -5.0, 5.0, (-2.0, 2.0))

tab1, tab2 = st.tabs(["Kernel Shapes", "Point Evaluation"])

with tab1:
    st.header("Kernel Shapes")

    grid = np.linspace(x_range[0], x_range[1], DEFAULT_PLOT_POINTS)

    fig = go.Figure()
    for name in KERNELS:
        result = evaluate_kernel(name, grid, mean=mean, sigma=sigma, normalize=normalize)
        fig.add_trace(go.Scatter(x=result.points, y=result.values, name=name))
    fig.update_layout(title="Kernels over x", xaxis_title="x", yaxis_title="K(x)")
    st.plotly_chart(fig, use_container_width=True)

    prof = kernel_profile(kernel, mean=mean, sigma=sigma, normalize=normalize)
    col1, col2, col3 = st.columns(3)
    col1.metric(label="Support", value=f"[{prof.support[0]:g}, {prof.support[1]:g}]")
    col2.metric(label="Peak", value=f"{prof.peak:.6g}")
    col3.metric(label="Area", value=f"{prof.area:.6g}")

with tab2:
    st.header(f"{kernel.capitalize()} Kernel Values")

    raw = st.text_input("Points (comma separated)", value="-1, -0.5, 0, 0.5, 1")

    try:
        points = [float(p) for p in raw.split(",") if p.strip()]
        result = evaluate_kernel(kernel, points, mean=mean, sigma=sigma, normalize=normalize)
        st.table(pd.DataFrame({"x": result.points, "K(x)": result.values}))
    except ValueError as e:
        st.error(f"Error: {e}")

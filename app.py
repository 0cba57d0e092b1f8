import logging
from typing import List

import streamlit as st

from initials_avatar import Avatar, ConfigurationError, Shape
from initials_avatar.color import palette

logging.basicConfig(level=logging.INFO)

COLOR_CHOICES: List[int] = [n for n in range(1, 361) if 360 % n == 0]

st.set_page_config(layout="wide", page_title="Initials Avatar")

config_col, preview_col = st.columns([0.4, 0.6])

with config_col:
    st.subheader("Name")
    name: str = st.text_input("Display name", value="Ada Lovelace", key="name")

    st.subheader("Style")
    shape: str = st.selectbox("Shape", [s.value for s in Shape], key="shape")
    size: int = st.slider("Size", 8, 512, 128, key="size")
    colors: int = st.select_slider(
        "Colors", options=COLOR_CHOICES, value=12, key="colors"
    )
    limit: int = st.slider("Initials limit", 1, 5, 3, key="limit")
    font_size_multiplier: float = st.slider(
        "Font size multiplier", 0.0, 2.0, 1.0, step=0.05, key="font_size_multiplier"
    )
    text_opacity: float = st.slider(
        "Text opacity", 0.0, 1.0, 0.75, step=0.05, key="text_opacity"
    )

    st.subheader("Title")
    title_mode: str = st.radio(
        "Title", ["none", "from name", "custom"], horizontal=True, key="title_mode"
    )
    title: object = None
    if title_mode == "from name":
        title = True
    elif title_mode == "custom":
        title = st.text_input("Title text", key="title_text")

with preview_col:
    try:
        avatar = Avatar(
            name,
            colors=colors,
            limit=limit,
            shape=shape,
            size=size,
            title=title,
            font_size_multiplier=font_size_multiplier,
            text_opacity=text_opacity,
        )
    except ConfigurationError as e:
        st.error(str(e))
    else:
        st.markdown(
            f"<img src='{avatar.data_uri()}' width='{size}' />",
            unsafe_allow_html=True,
        )
        st.info(
            f"**Initials:** {avatar.initials()}  \n"
            f"**Fill:** {avatar.fill()}  \n"
            f"**Font size:** {avatar.font_size()}px",
        )
        st.code(avatar.render(), language="xml")
        st.text("Palette")
        swatches = "".join(
            f"<span style='display:inline-block;width:24px;height:24px;background:{c}'></span>"
            for c in palette(colors)
        )
        st.markdown(swatches, unsafe_allow_html=True)

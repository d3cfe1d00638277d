import streamlit as st

SIGN_OUT_KEY = "sign_out"


def welcome_ui(email, on_sign_out):
    st.header("Welcome! 🎉")

    with st.container(border=True):
        st.caption("You are logged in as:")
        st.text(email)

    st.button("Sign Out", key=SIGN_OUT_KEY, type="primary", use_container_width=True, on_click=on_sign_out)

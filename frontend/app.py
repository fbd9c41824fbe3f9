import streamlit as st
from config import APP_TITLE

st.set_page_config(
    page_title=APP_TITLE,
    layout="centered",
)

st.title(APP_TITLE)
st.caption("Learn vocabulary with swipe-style flashcards and AI feedback.")

st.markdown("---")

st.markdown(
    """
### How it works

- Pick a study language and one of its flashcard sets
- Go through the cards: **I know it**, **I don't know it**, or **Pass**
- Finish early at any time; the remaining cards count as passed
- Save the result, or send the words you missed for AI feedback and mnemonics

Open **Study** in the sidebar to start.
"""
)

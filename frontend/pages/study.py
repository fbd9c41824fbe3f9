import requests
import streamlit as st

from api import analyze_session, list_flashcards, list_languages, save_session
from lingocards.exceptions import InvalidTransitionError
from lingocards.schemas.flashcards import WordPair
from lingocards.services.study.deck import StudyDeck

st.title("🃏 Study")


def _start(flashcard: dict) -> None:
    words = [WordPair.model_validate(word) for word in flashcard["words"]]
    st.session_state.deck = StudyDeck(words)
    st.session_state.flashcard = flashcard
    st.session_state.revealed = False
    st.session_state.analysis = None


try:
    languages = list_languages()
except requests.RequestException as e:
    st.error(f"Backend unavailable: {e}")
    st.stop()

language = st.selectbox("Language", options=languages, format_func=lambda lang: lang["name"])
flashcards = list_flashcards(language["id"]) if language else []
if not flashcards:
    st.info("No flashcards for this language yet.")
    st.stop()

selected = st.selectbox("Flashcard", options=flashcards, format_func=lambda fc: fc["title"])
if st.button("Start", type="primary"):
    _start(selected)

deck: StudyDeck = st.session_state.get("deck")
if deck is None:
    st.stop()

flashcard = st.session_state.flashcard

if not deck.completed:
    card = deck.current_card
    index = deck.current_index
    st.progress(index / deck.total if deck.total else 1.0, text=f"{index + 1} / {deck.total}")

    if card is not None:
        st.subheader(card.front)
        if st.session_state.revealed:
            st.markdown(f"**{card.back}**")
        elif st.button("Show answer"):
            st.session_state.revealed = True
            st.rerun()

    left, middle, right, finish = st.columns(4)
    try:
        if left.button("✗ Don't know", disabled=card is None):
            deck.swipe_left(index)
        elif middle.button("Pass", disabled=card is None):
            deck.pass_card(index)
        elif right.button("✓ Know", disabled=card is None):
            deck.swipe_right(index)
        elif finish.button("Finish"):
            deck.finish()
        else:
            st.stop()
    except InvalidTransitionError as e:
        st.warning(str(e))
        st.stop()
    st.session_state.revealed = False
    st.rerun()

tallies = deck.tallies()
st.subheader("Results")
col1, col2, col3 = st.columns(3)
col1.metric("Known", f"{tallies.known_count} / {deck.total}")
col2.metric("Unknown", f"{tallies.unknown_count} / {deck.total}")
col3.metric("Passed", f"{tallies.skipped_count} / {deck.total}")

body = tallies.model_dump(by_alias=True)
replay, save, analyze = st.columns(3)
if replay.button("Replay"):
    deck.replay()
    st.session_state.analysis = None
    st.rerun()

if save.button("Save and exit"):
    try:
        save_session(flashcard["id"], body)
        st.success("Session saved.")
        del st.session_state["deck"]
    except requests.RequestException as e:
        st.error(f"Could not save session: {e}")

if analyze.button("Analyze with AI", type="primary"):
    with st.spinner("Analyzing..."):
        try:
            result = analyze_session(flashcard["id"], body)
            st.session_state.analysis = result.get("aiAnalysis")
            if st.session_state.analysis is None:
                st.info("Session saved, but AI analysis is not available right now.")
        except requests.RequestException as e:
            st.error(f"Analysis failed: {e}")

analysis = st.session_state.get("analysis")
if analysis:
    st.markdown("### AI feedback")
    st.write(analysis.get("aiFeedback") or "")
    for entry in analysis.get("wordAnalysis", []):
        with st.expander(entry["wordKey"]):
            if entry.get("aiMnemonic"):
                st.write(entry["aiMnemonic"])
            if entry.get("difficultyLevel") is not None:
                st.caption(f"Difficulty: {entry['difficultyLevel']}")

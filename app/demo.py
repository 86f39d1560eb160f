"""
Minefield - Browser Game

Run with: streamlit run app/demo.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st

from minefield import DIFFICULTIES, DIFFICULTY_PRESETS, GameSession, GameSnapshot, TileView

FLAG = "⚑"
MINE = "💣"

# Streamlit label colors; button labels accept ":color[text]" markdown.
NUMBER_COLORS = {
    1: "blue",
    2: "green",
    3: "red",
    4: "violet",
    5: "orange",
    6: "blue",
    7: "gray",
    8: "gray",
}


def number_label(value: int) -> str:
    return f":{NUMBER_COLORS[value]}[**{value}**]"


def tile_label(tile: TileView, show_mines: bool = False) -> str:
    """Text shown on a tile button."""
    if tile.is_revealed:
        if tile.is_mine:
            return MINE
        return number_label(tile.value) if tile.value else " "
    if show_mines and tile.is_mine:
        return MINE
    if tile.is_flagged:
        return FLAG
    return " "


def preset_label(difficulty: str) -> str:
    preset = DIFFICULTY_PRESETS[difficulty]
    return f"{difficulty.title()} ({preset.width}x{preset.height}, {preset.mine_count})"


def on_tile_press(x: int, y: int) -> None:
    session: GameSession = st.session_state.session
    button = "secondary" if st.session_state.flag_mode else "primary"
    session.press(x, y, button=button)


def on_difficulty_change() -> None:
    st.session_state.session.select_difficulty(st.session_state.difficulty)


def on_reset() -> None:
    st.session_state.session.reset()


def render_grid(snap: GameSnapshot) -> None:
    """Render the board as a grid of buttons, one row of columns per y."""
    for y in range(snap.height):
        cols = st.columns(snap.width, gap="small")
        for x in range(snap.width):
            tile = snap.tile(x, y)
            with cols[x]:
                st.button(
                    tile_label(tile, show_mines=snap.has_failed),
                    key=f"tile-{x}-{y}",
                    on_click=on_tile_press,
                    args=(x, y),
                    disabled=tile.is_revealed or snap.has_failed or snap.has_won,
                    use_container_width=True,
                )


def render_legend() -> None:
    numbers = " ".join(number_label(n) for n in NUMBER_COLORS)
    st.caption(f"**Legend:** {FLAG} Flag · {MINE} Mine · {numbers} Adjacent mines")


def main():
    st.set_page_config(
        page_title="Minefield",
        page_icon="💣",
        layout="wide",
    )

    # Initialize session state
    if "session" not in st.session_state:
        st.session_state.session = GameSession()
        st.session_state.flag_mode = False

    session: GameSession = st.session_state.session

    st.title("Minefield")

    # Sidebar configuration
    st.sidebar.header("Game")
    st.sidebar.selectbox(
        "Difficulty",
        DIFFICULTIES,
        index=DIFFICULTIES.index(session.difficulty),
        format_func=preset_label,
        key="difficulty",
        on_change=on_difficulty_change,
        help="Changing the difficulty starts a new game.",
    )
    st.sidebar.button("Reset", on_click=on_reset, type="primary")
    st.sidebar.toggle(
        "Flag mode",
        key="flag_mode",
        help="Browsers here have no right-click or long-press on buttons; "
             "with flag mode on, clicking a tile toggles its flag.",
    )

    snap = session.snapshot()

    col1, col2 = st.columns([4, 1])
    with col1:
        if snap.has_failed:
            st.error("You Failed!")
            st.button("Restart", key="restart-failed", on_click=on_reset)
        elif snap.has_won:
            st.success("You Won!")
            st.button("Restart", key="restart-won", on_click=on_reset)

        render_grid(snap)
        render_legend()

    with col2:
        st.metric(f"{FLAG} Mines left", snap.mines_remaining)
        st.metric("Difficulty", snap.difficulty.title())
        st.metric("Status", snap.status.title())


if __name__ == "__main__":
    main()

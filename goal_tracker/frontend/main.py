import streamlit as st
import plotly.express as px
import json
from datetime import date, timedelta
import os

from goal_tracker.config import settings, setup_logging
from goal_tracker.models.goal import ALL_CATEGORIES, GoalCategory, GoalStatus, GoalTab
from goal_tracker.schemas.goal import GoalDraft, GoalRecord
from goal_tracker.frontend.steps import edited_steps, steps_to_text, text_to_steps
from goal_tracker.services.goal_client import GoalClient
from goal_tracker.services.goal_view import GoalViewController, summarize_by_category

# Configure the page
st.set_page_config(
    page_title="Goal Tracker",
    page_icon="🎯",
    layout="wide"
)

setup_logging()

GOAL_PAGE = "Goal Tracker"
CATEGORY_OPTIONS = [ALL_CATEGORIES] + [category.value for category in GoalCategory]

def load_css():
    """Load external CSS file"""
    css_path = os.path.join(os.path.dirname(__file__), "style.css")
    with open(css_path) as f:
        st.markdown(f'<style>{f.read()}</style>', unsafe_allow_html=True)

def init_session_state():
    """Initialize session state variables."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = GOAL_PAGE
    if "goal_controller" not in st.session_state:
        st.session_state.goal_controller = GoalViewController(GoalClient())

def get_controller() -> GoalViewController:
    return st.session_state.goal_controller

def sign_in():
    """Entry page: stores the session record the goal page reads."""
    st.title("🎯 Goal Tracker")
    st.write("Sign in to see your goals.")

    with st.form("sign_in_form"):
        user_id = st.number_input("User ID", min_value=1, step=1, value=1)
        submitted = st.form_submit_button("Sign in")

    if submitted:
        st.session_state.user = json.dumps({"user": {"id": int(user_id)}})
        st.session_state.goal_controller = GoalViewController(GoalClient())
        st.session_state.current_page = GOAL_PAGE
        st.rerun()

def sign_out():
    """Forget the session and go back to the entry page."""
    st.session_state.pop("user", None)
    st.session_state.goal_controller = GoalViewController(GoalClient())
    st.session_state.current_page = settings.ENTRY_PAGE
    st.rerun()

def show_sidebar():
    signed_in = "user" in st.session_state

    st.sidebar.markdown("**Navigation**")
    # The entry page is only the sign-in form
    if not signed_in and st.sidebar.button("🏠 Home"):
        st.session_state.current_page = settings.ENTRY_PAGE
        st.rerun()
    if st.sidebar.button("🎯 Goal Tracker"):
        st.session_state.current_page = GOAL_PAGE
        st.rerun()

    if signed_in:
        st.sidebar.markdown("---")
        if st.sidebar.button("🚪 Sign out"):
            sign_out()

def show_add_goal(controller: GoalViewController):
    """Add-goal form"""
    with st.expander("➕ Add Goal"):
        with st.form("add_goal_form", clear_on_submit=True):
            title = st.text_input("Title")
            col1, col2 = st.columns(2)
            with col1:
                category = st.selectbox("Category", [c.value for c in GoalCategory])
            with col2:
                end_date = st.date_input("End date", value=date.today() + timedelta(days=30))
            steps_text = st.text_area("Steps (one per line)")
            submitted = st.form_submit_button("Add Goal")

        if submitted:
            if not title.strip():
                st.error("A goal needs a title")
                return
            draft = GoalDraft(
                title=title.strip(),
                category=GoalCategory(category),
                completed=0,
                end_date=end_date,
                steps=text_to_steps(steps_text),
            )
            if controller.add_goal(draft) is None:
                st.error("Failed to add goal")
            else:
                st.rerun()

def show_goal_box(controller: GoalViewController, goal: GoalRecord, key_prefix: str):
    """Card for a single goal with its edit form and delete button."""
    with st.expander(f"{goal.title} ({goal.completed}%)", expanded=True):
        st.markdown(f'<span class="goal-category">{GoalCategory(goal.category).value}</span>', unsafe_allow_html=True)
        st.progress(goal.completed)
        st.write(f"**Due:** {goal.end_date.strftime('%B %d, %Y')}")

        if goal.steps:
            for step in goal.steps:
                st.markdown(f"{'✅' if step.done else '⬜'} {step.title}")

        form_key = f"{key_prefix}_edit_goal_{goal.id}"
        with st.form(form_key):
            title = st.text_input("Title", value=goal.title, key=f"{form_key}_title")
            category = st.selectbox(
                "Category",
                [c.value for c in GoalCategory],
                index=list(GoalCategory).index(GoalCategory(goal.category)),
                key=f"{form_key}_category",
            )
            completed = st.slider("Completed (%)", 0, 100, goal.completed, key=f"{form_key}_completed")
            end_date = st.date_input("End date", value=goal.end_date, key=f"{form_key}_end_date")
            steps_text = st.text_area("Steps (one per line, [x] marks done)", value=steps_to_text(goal.steps), key=f"{form_key}_steps")
            submitted = st.form_submit_button("Save")

        if submitted:
            edited = GoalRecord(
                id=goal.id,
                title=title.strip() or goal.title,
                category=GoalCategory(category),
                completed=completed,
                end_date=end_date,
                steps=edited_steps(goal.steps, steps_text),
            )
            if controller.edit_goal(edited) is None:
                st.error("Failed to update goal")
            else:
                st.rerun()

        if st.button("🗑️ Delete", key=f"{key_prefix}_delete_goal_{goal.id}"):
            if controller.delete_goal(goal.id):
                st.rerun()
            else:
                st.error("Failed to delete goal")

def show_progress_chart(controller: GoalViewController):
    """Goals per category, stacked by status."""
    summary = summarize_by_category(controller.state.goals)
    if summary.empty:
        return

    st.subheader("📊 Progress by Category")
    fig = px.bar(
        summary,
        x="category",
        y=[status.value for status in GoalStatus],
        title="Goals by Category",
        labels={"category": "Category", "value": "Goals", "variable": "Status"},
    )
    st.plotly_chart(fig, use_container_width=True)

def show_goal_tracker():
    controller = get_controller()

    # One-shot: the controller ignores repeated calls once loaded
    if not controller.bootstrap(st.session_state):
        st.session_state.current_page = settings.ENTRY_PAGE
        st.rerun()

    st.title("🎯 Goal Tracker")

    show_add_goal(controller)

    category = st.selectbox("Goal category", CATEGORY_OPTIONS, key="goal_category")
    controller.select_category(category)

    counts = controller.counts()
    goals_by_tab = controller.tabs()
    tab_widgets = st.tabs([f"{tab.value} ({counts[tab]})" for tab in GoalTab])

    for widget, tab in zip(tab_widgets, GoalTab):
        with widget:
            goals = goals_by_tab[tab]
            if not goals:
                st.info("No goals to show")
                continue
            columns = st.columns(4)
            for index, goal in enumerate(goals):
                with columns[index % 4]:
                    show_goal_box(controller, goal, key_prefix=tab.name)

    show_progress_chart(controller)

def main():
    """Main application entry point."""
    load_css()
    init_session_state()
    show_sidebar()

    if st.session_state.current_page == GOAL_PAGE:
        show_goal_tracker()
    else:
        sign_in()

if __name__ == "__main__":
    main()

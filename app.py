"""
🏋️ CoachMVP — Streamlit Dashboard
Programmes, séances, analytics (volume, intensité, durée).
Run: streamlit run app.py
"""
import streamlit as st

from coach_mvp.analytics import compute_session_metrics, summarize_sessions, weekly_breakdown
from coach_mvp.charts import duration_chart, fmt_number, intensity_chart, sort_weeks, weekly_volume_chart
from coach_mvp.config import STATE_DIR
from coach_mvp.models import CoachState
from coach_mvp.storage import JsonFileStore, load_or_seed, reset_state, save_state
from coach_mvp.workspace import (
    add_client, add_day, add_exercise, delete_client, delete_exercise, delete_session,
    exercises_frame, exercises_from_frame, seed_state, session_from_day,
    update_client, update_session,
)

# ── Page Config ──────────────────────────────────────────────────────
st.set_page_config(page_title="CoachMVP", page_icon="🏋️", layout="wide", initial_sidebar_state="expanded")

st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Space+Grotesk:wght@400;500;600;700&display=swap');
    .stApp { font-family: 'Space Grotesk', sans-serif; }
    div[data-testid="stMetric"] {
        background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%);
        border: 1px solid #1e3a5f; border-radius: 12px; padding: 16px;
    }
    div[data-testid="stMetric"] label { color: #94a3b8 !important; font-size: 0.85rem; }
    div[data-testid="stMetric"] [data-testid="stMetricValue"] { color: #f1f5f9 !important; }
    h1, h2, h3 { font-family: 'Space Grotesk', sans-serif !important; }
</style>
""", unsafe_allow_html=True)

EXERCISE_COLUMN_CONFIG = {
    "name": st.column_config.TextColumn("Exercice", width="medium"),
    "sets": st.column_config.NumberColumn("Séries", min_value=0, step=1),
    "reps": st.column_config.NumberColumn("Reps", min_value=0, step=1),
    "load": st.column_config.NumberColumn("Charge (kg)", min_value=0.0, step=2.5),
    "rpe": st.column_config.NumberColumn("RPE", min_value=0.0, max_value=10.0, step=0.5),
    "tempo": st.column_config.TextColumn("Tempo"),
    "rest": st.column_config.NumberColumn("Repos (s)", min_value=0, step=15),
}

store = JsonFileStore(STATE_DIR)


# ── State ────────────────────────────────────────────────────────────
def _state() -> CoachState:
    return st.session_state["coach"]


def _commit(state: CoachState, structural: bool = False):
    """Keep the edit and auto-save. Structural edits reset the table editors."""
    st.session_state["coach"] = state
    save_state(store, state)
    if structural:
        st.session_state["rev"] += 1
        st.rerun()


def _editor(exercises, key: str):
    """Exercise table; returns the edited rows as ExerciseEntry list."""
    edited = st.data_editor(
        exercises_frame(exercises), column_config=EXERCISE_COLUMN_CONFIG,
        hide_index=True, use_container_width=True,
        key=f"{key}_{st.session_state['rev']}",
    )
    return exercises_from_frame(edited)


try:
    if "coach" not in st.session_state:
        st.session_state["coach"] = load_or_seed(store)
        st.session_state["rev"] = 0
except Exception as e:
    st.error(f"Erreur de chargement: {e}")
    st.stop()

# ── Sidebar ──────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown("# 🏋️ CoachMVP")
    st.caption("Créateur de programmes — prototype")
    st.divider()
    page = st.radio("Section", [
        "📊 Dashboard",
        "📝 Programme",
        "💪 Séances",
        "👥 Clients",
    ], label_visibility="collapsed")
    st.divider()
    if st.button("💾 Sauvegarder localement", use_container_width=True):
        save_state(store, _state())
        st.toast("Sauvegardé")
    if st.button("🗑️ Réinitialiser", use_container_width=True):
        reset_state(store)
        st.session_state["coach"] = seed_state()
        st.session_state["rev"] += 1
        st.rerun()

state = _state()


# ══════════════════════════════════════════════════════════════════════
# 📊 DASHBOARD
# ══════════════════════════════════════════════════════════════════════
if page == "📊 Dashboard":
    st.markdown("## 📊 Dashboard")

    totals = summarize_sessions(state.sessions)
    c1, c2, c3 = st.columns(3)
    c1.metric("Volume total", f"{fmt_number(totals.volume_kg)} kg")
    c2.metric("Intensité moyenne", f"{fmt_number(totals.avg_intensity * 100)} %")
    c3.metric("Temps cumulé", f"{fmt_number(totals.duration_min)} min")

    st.divider()
    weekly = sort_weeks(weekly_breakdown(state.sessions))
    if weekly.empty:
        st.info("Aucune séance enregistrée.")
    else:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.markdown("### Volume hebdo (kg)")
            st.plotly_chart(weekly_volume_chart(weekly), use_container_width=True, key="chart_volume")
        with col2:
            st.markdown("### Intensité moyenne")
            st.plotly_chart(intensity_chart(weekly), use_container_width=True, key="chart_intensity")
        with col3:
            st.markdown("### Temps total hebdo (min)")
            st.plotly_chart(duration_chart(weekly), use_container_width=True, key="chart_duration")


# ══════════════════════════════════════════════════════════════════════
# 📝 PROGRAMME
# ══════════════════════════════════════════════════════════════════════
elif page == "📝 Programme":
    st.markdown("## 📝 Programme")
    program = state.program

    c1, c2 = st.columns(2)
    name = c1.text_input("Nom", program.name)
    notes = c2.text_input("Notes", program.notes)
    if name != program.name or notes != program.notes:
        program = program.model_copy(update={"name": name, "notes": notes})
        _commit(state.model_copy(update={"program": program}))

    for di, day in enumerate(program.days):
        st.divider()
        head, add_col = st.columns([4, 1])
        head.markdown(f"### {day.label}")
        if add_col.button("➕ Ajouter un exercice", key=f"add_ex_{di}"):
            _commit(state.model_copy(update={"program": add_exercise(program, di)}), structural=True)

        edited = _editor(day.exercises, key=f"prog_{di}")
        if edited != day.exercises:
            days = [d.model_copy(update={"exercises": edited}) if i == di else d
                    for i, d in enumerate(program.days)]
            program = program.model_copy(update={"days": days})
            _commit(state.model_copy(update={"program": program}))

        if day.exercises:
            dc1, dc2 = st.columns([4, 1])
            ex_idx = dc1.selectbox(
                "Exercice à supprimer", range(len(day.exercises)),
                format_func=lambda i, d=day: f"{i + 1}. {d.exercises[i].name}",
                key=f"del_sel_{di}_{st.session_state['rev']}", label_visibility="collapsed",
            )
            if dc2.button("🗑️ Supprimer", key=f"del_ex_{di}"):
                _commit(state.model_copy(update={"program": delete_exercise(program, di, ex_idx)}),
                        structural=True)

    st.divider()
    if st.button("➕ Ajouter un jour"):
        _commit(state.model_copy(update={"program": add_day(program)}), structural=True)


# ══════════════════════════════════════════════════════════════════════
# 💪 SÉANCES
# ══════════════════════════════════════════════════════════════════════
elif page == "💪 Séances":
    st.markdown("## 💪 Séances")

    cols = st.columns(max(len(state.program.days), 1))
    for di, (col, day) in enumerate(zip(cols, state.program.days)):
        if col.button(f"➕ Nouvelle séance depuis {day.label}", key=f"new_s_{di}"):
            sessions = [*state.sessions, session_from_day(state.program, di)]
            _commit(state.model_copy(update={"sessions": sessions}), structural=True)

    if not state.sessions:
        st.info("Aucune séance. Créez-en une depuis un jour du programme.")

    for i, s in enumerate(state.sessions):
        st.divider()
        head, del_col = st.columns([5, 1])
        head.markdown(f"### Séance du {s.date}")
        if del_col.button("🗑️", key=f"del_s_{s.id}", help="Supprimer la séance"):
            _commit(state.model_copy(update={"sessions": delete_session(state.sessions, i)}),
                    structural=True)

        c1, c2 = st.columns([1, 3])
        date = c1.date_input("Date", s.date, key=f"date_{s.id}")
        notes = c2.text_input("Notes", s.notes, key=f"notes_{s.id}", placeholder="Notes")
        exercises = _editor(s.exercises, key=f"sess_{s.id}")

        updated = s.model_copy(update={"date": date, "notes": notes, "exercises": exercises})
        if updated != s:
            state = state.model_copy(update={"sessions": update_session(state.sessions, i, updated)})
            _commit(state)

        m = compute_session_metrics(updated)
        m1, m2, m3 = st.columns(3)
        m1.metric("Volume", f"{fmt_number(m.volume_kg)} kg")
        m2.metric("Intensité moy.", f"{fmt_number(m.avg_intensity * 100)} %")
        m3.metric("Durée estimée", f"{fmt_number(m.duration_min)} min")


# ══════════════════════════════════════════════════════════════════════
# 👥 CLIENTS
# ══════════════════════════════════════════════════════════════════════
elif page == "👥 Clients":
    head, add_col = st.columns([5, 1])
    head.markdown("## 👥 Clients")
    if add_col.button("➕ Ajouter"):
        _commit(state.model_copy(update={"clients": add_client(state.clients)}), structural=True)

    cols = st.columns(2)
    for i, c in enumerate(state.clients):
        with cols[i % 2]:
            st.markdown(f"#### {c.name or 'Client'}")
            name = st.text_input("Nom", c.name, key=f"c_name_{c.id}")
            email = st.text_input("Email", c.email, key=f"c_email_{c.id}", placeholder="email")
            notes = st.text_area("Notes", c.notes, key=f"c_notes_{c.id}", placeholder="notes")
            updated = c.model_copy(update={"name": name, "email": email, "notes": notes})
            if updated != c:
                state = state.model_copy(update={"clients": update_client(state.clients, i, updated)})
                _commit(state)
            if st.button("🗑️ Supprimer", key=f"del_c_{c.id}"):
                _commit(state.model_copy(update={"clients": delete_client(state.clients, i)}),
                        structural=True)

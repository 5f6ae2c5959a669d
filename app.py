import streamlit as st
import pandas as pd
import matplotlib.pyplot as plt

import importlib
import time

from plots import plot_cash, plot_sales, plot_events

# Local modules
import config as cfg
import sim as sim_module

st.set_page_config(page_title="Lemonade Stand Season", layout="wide")

st.title("Lemonade Stand Season Simulator")

with st.sidebar:
    st.header("Configuration")
    seed = st.number_input("Seed", min_value=0, value=cfg.SEED, step=1)
    n_stands = st.number_input("Stands", min_value=1, max_value=cfg.MAX_STANDS, value=3, step=1)
    REDRAW_RAIN_SEVERITY = st.checkbox(
        "Redraw rain severity at resolution",
        value=bool(cfg.REDRAW_RAIN_SEVERITY),
        help="Off: the forecast rain percentage is the one applied to demand.",
    )

    st.markdown("---")
    st.subheader("Daily plan per stand")
    plans = []
    for i in range(int(n_stands)):
        with st.expander(f"Stand {i + 1}", expanded=(i == 0)):
            glasses = st.number_input("Glasses", min_value=0, max_value=cfg.MAX_GLASSES, value=40, step=5, key=f"g{i}")
            signs = st.number_input("Signs", min_value=0, max_value=cfg.MAX_SIGNS, value=2, step=1, key=f"s{i}")
            price = st.number_input("Price (cents)", min_value=0, max_value=cfg.MAX_PRICE_CENTS, value=10 + 5 * i, step=1, key=f"p{i}")
            plans.append(sim_module.Plan(glasses=int(glasses), signs=int(signs), price_cents=int(price)))

    st.markdown("---")
    run_btn = st.button("Run Season")


def set_config():
    # Assign chosen params to the config module
    cfg.SEED = int(seed)
    cfg.REDRAW_RAIN_SEVERITY = bool(REDRAW_RAIN_SEVERITY)


# =========================
# Run
# =========================
if run_btn:
    set_config()

    # submodules read cfg at call time, reload keeps module state fresh between runs
    importlib.reload(sim_module)

    with st.spinner("Simulating…"):
        t0 = time.perf_counter()
        df_days, stands, df_standings = sim_module.simulate_season(plans=plans, seed=cfg.SEED)
        runtime_s = time.perf_counter() - t0
    st.success("Done!")

    c0, c1, c2 = st.columns(3)
    c0.metric("Runtime", f"{runtime_s:.3f} s")
    c1.metric("Days played", int(df_days["day"].max()) if not df_days.empty else 0)
    c2.metric("Bankrupt stands", sum(1 for s in stands if s.bankrupt))

    c3, c4 = st.columns(2)
    with c3:
        st.subheader("Cash over time")
        fig, ax = plt.subplots()
        plot_cash(df_days[~df_days["skipped"]], ax=ax)
        st.pyplot(fig)

    with c4:
        st.subheader("Production and sales")
        fig, ax = plt.subplots()
        plot_sales(df_days, ax=ax)
        st.pyplot(fig)

    st.subheader("Weather events")
    fig, ax = plt.subplots(figsize=(10, 3))
    plot_events(df_days, ax=ax)
    st.pyplot(fig)

    # =========================
    # Final standings
    # =========================
    st.header("Final standings")
    top = df_standings.iloc[0] if not df_standings.empty else None
    if top is not None and float(top["cash"]) > cfg.START_CASH:
        st.write(f"Stand {int(top['stand_id'])} wins with ${float(top['cash']):.2f}")
    else:
        st.write("No winner: nobody ended above the starting cash.")
    st.dataframe(df_standings)
    st.download_button(
        "Download standings CSV",
        data=df_standings.to_csv(index=False).encode("utf-8"),
        file_name="standings.csv",
        mime="text/csv",
    )

    # =========================
    # Data (all days) and downloads
    # =========================
    st.header("Daily data")
    st.dataframe(df_days)
    csv = df_days.to_csv(index=False).encode("utf-8")
    st.download_button("Download daily CSV", data=csv, file_name="season_days.csv", mime="text/csv")

    st.header("Stand histories")
    histories = [s.history.assign(stand_id=s.id) for s in stands if len(s.history) > 0]
    if histories:
        st.dataframe(pd.concat(histories, ignore_index=True))
    else:
        st.write("No stand records.")

else:
    st.info("Set the stand plans in the sidebar and click Run Season.")

import matplotlib.pyplot as plt

EVENT_LEVELS = {"none": 0, "street_work": 1, "light_rain": 2, "heat_wave": 3, "storm": 4}
EVENT_NAMES = ["None", "Street work", "Light rain", "Heat wave", "Storm"]


def _groups(df):
    """[(stand label, rows sorted by day)] for every stand in a day panel."""
    if "stand_id" in df.columns and df["stand_id"].nunique() > 1:
        return [(f"Stand {s}", d.sort_values("day")) for s, d in df.groupby("stand_id", sort=True)]
    return [("all", df.sort_values("day"))]


def _event_days(df):
    return df.drop_duplicates(subset=["day"]).sort_values("day")


def plot_cash(df_days, ax=None):
    """Cash after each day, one line per stand."""
    show = ax is None
    if ax is None:
        plt.figure()
        ax = plt.gca()
    for label, d in _groups(df_days):
        ax.plot(d["day"], d["cash"], label=label)
    ax.set_xlabel("Day"); ax.set_ylabel("Cash ($)"); ax.set_title("Cash over the season")
    ax.legend(); ax.grid(True)
    if show:
        plt.show()
    return ax


def plot_sales(df_days, ax=None):
    """Glasses made vs sold, summed over stands."""
    show = ax is None
    if ax is None:
        plt.figure()
        ax = plt.gca()
    totals = df_days.groupby("day", as_index=False)[["glasses", "glasses_sold"]].sum()
    ax.plot(totals["day"], totals["glasses"], label="Glasses made")
    ax.plot(totals["day"], totals["glasses_sold"], label="Glasses sold")
    ax.set_xlabel("Day"); ax.set_ylabel("Glasses"); ax.set_title("Production and sales")
    ax.legend(); ax.grid(True)
    if show:
        plt.show()
    return ax


def plot_events(df_days, ax=None):
    """Step chart of the day's weather event."""
    show = ax is None
    if ax is None:
        plt.figure()
        ax = plt.gca()
    days = _event_days(df_days)
    levels = days["event"].map(EVENT_LEVELS).fillna(0)
    ax.plot(days["day"], levels, drawstyle="steps-post", linestyle="--", label="Event")
    ax.set_yticks(list(range(len(EVENT_NAMES))), labels=EVENT_NAMES)
    ax.set_xlabel("Day"); ax.set_title("Daily events")
    ax.grid(True)
    if show:
        plt.show()
    return ax

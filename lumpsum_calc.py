from __future__ import annotations

from typing import Dict

import streamlit as st

import config
from breakdown import breakdown_frame, growth_curve
from charts import allocation_pie_chart, comparison_bar_chart, growth_line_chart
from compounding import equivalent_monthly_sip
from formatting import group_indian, money, pct
from scenario import Mode, compare_lumpsum_vs_sip
from session import CalculatorSession

# lumpsum_calc.py - Streamlit page for the lumpsum calculator
#
# Form values live under "_<field>" keys. Streamlit drops a widget's own key
# once the widget is not rendered (mode switch, toggled-off sliders), so each
# widget is seeded from the stored value and writes back through on_change.

MODE_LABELS = {"Investment": Mode.INVESTMENT, "Goal": Mode.GOAL}

FORM_DEFAULTS = {
    "mode": "Investment",
    "lumpsum_amount": group_indian(config.DEFAULTS["lumpsum_amount"]),
    "goal_amount": group_indian(config.DEFAULTS["goal_amount"]),
    "years": int(config.DEFAULTS["years"]),
    "annual_return_pct": float(config.DEFAULTS["annual_return_pct"]),
    "compounding_freq": int(config.DEFAULTS["compounding_freq"]),
    "inflation_enabled": False,
    "inflation_pct": float(config.DEFAULTS["inflation_pct"]),
    "tax_enabled": False,
    "tax_pct": float(config.DEFAULTS["tax_pct"]),
}


def _stored(field: str) -> str:
    return f"_{field}"


def form_value(field: str) -> object:
    return st.session_state[_stored(field)]


def _init_state() -> None:
    for field, value in FORM_DEFAULTS.items():
        st.session_state.setdefault(_stored(field), value)
    st.session_state.setdefault("show_comparison", False)
    if "calc_session" not in st.session_state:
        st.session_state["calc_session"] = CalculatorSession()


def _set_form(**values: object) -> None:
    for field, value in values.items():
        st.session_state[_stored(field)] = value


def _save(field: str) -> None:
    st.session_state[_stored(field)] = st.session_state[field]


# Seed the widget key from the stored value; returns the widget kwargs.
def _bind(field: str) -> Dict[str, object]:
    st.session_state[field] = form_value(field)
    return dict(key=field, on_change=_save, args=(field,))


# Widget callbacks: they run before the rerun, ahead of any widget creation.
def _reset() -> None:
    _set_form(**FORM_DEFAULTS)
    st.session_state["show_comparison"] = False


def _apply_preset(name: str) -> None:
    preset = config.SCENARIO_PRESETS[name]
    _set_form(
        mode="Investment",
        lumpsum_amount=group_indian(preset["lumpsum_amount"]),
        years=int(preset["years"]),
        annual_return_pct=float(preset["annual_return_pct"]),
        compounding_freq=1,
        inflation_enabled=False,
        tax_enabled=False,
    )
    st.session_state["show_comparison"] = False


def _set_amount(amount: int) -> None:
    _set_form(lumpsum_amount=group_indian(amount))


def _switch_mode() -> None:
    _save("mode")
    st.session_state["show_comparison"] = False


def _show_comparison() -> None:
    st.session_state["show_comparison"] = True


def _slider(field: str, step: float) -> None:
    lo, hi, label = config.FIELD_LIMITS[field]
    st.slider(label, min_value=type(step)(lo), max_value=type(step)(hi), step=step, **_bind(field))


def _read_form() -> Dict[str, object]:
    return {f: form_value(f) for f in FORM_DEFAULTS if f != "mode"}


def render_inputs() -> Mode:
    st.session_state["mode"] = form_value("mode")
    st.radio("Calculate", list(MODE_LABELS), key="mode", horizontal=True, on_change=_switch_mode)
    mode = MODE_LABELS[form_value("mode")]

    c1, c2, c3 = st.columns(3)
    with c1:
        if mode == Mode.INVESTMENT:
            st.text_input(
                config.FIELD_LIMITS["lumpsum_amount"][2],
                help="e.g. 1,00,000 or ₹250000",
                **_bind("lumpsum_amount"),
            )
            cols = st.columns(len(config.AMOUNT_PRESETS))
            for col, amount in zip(cols, config.AMOUNT_PRESETS):
                col.button(money(amount), key=f"amt_{amount}", on_click=_set_amount, args=(amount,))
        else:
            st.text_input(config.FIELD_LIMITS["goal_amount"][2], help="Target amount at maturity", **_bind("goal_amount"))
        _slider("years", 1)
    with c2:
        _slider("annual_return_pct", 0.5)
        st.selectbox(
            "Compounding",
            list(config.COMPOUNDING_OPTIONS),
            format_func=lambda n: config.COMPOUNDING_OPTIONS[n],
            **_bind("compounding_freq"),
        )
    with c3:
        st.checkbox("Adjust for inflation", **_bind("inflation_enabled"))
        if form_value("inflation_enabled"):
            _slider("inflation_pct", 0.5)
        st.checkbox("Consider tax on gains", **_bind("tax_enabled"))
        if form_value("tax_enabled"):
            _slider("tax_pct", 1.0)
    return mode


def render_results(session: CalculatorSession) -> None:
    res, inputs = session.result, session.inputs

    k1, k2, k3 = st.columns(3)
    k1.metric("Initial Investment", money(res.initial_investment))
    k2.metric("Estimated Gains", money(res.estimated_gains))
    k3.metric("Maturity Amount", money(res.maturity_amount))

    k4, k5, k6 = st.columns(3)
    k4.metric("Effective Annual Return", pct(res.effective_annual_return_pct))
    k5.metric("Total Return", pct(res.total_return_pct))
    k6.metric(
        "Equivalent Monthly SIP",
        money(equivalent_monthly_sip(res.initial_investment, inputs.annual_return_pct, inputs.years)),
        help="Monthly SIP reaching the same maturity with monthly compounding.",
    )

    extra = []
    if inputs.inflation_enabled:
        extra.append(("Inflation-adjusted Value", money(res.inflation_adjusted_amount)))
    if inputs.tax_enabled:
        extra.append(("Post-tax Amount", money(res.post_tax_amount)))
    if res.required_lumpsum is not None:
        extra.append(("Required Lumpsum", money(res.required_lumpsum)))
    if extra:
        for col, (label, value) in zip(st.columns(len(extra)), extra):
            col.metric(label, value)

    curve = growth_curve(res.initial_investment, inputs.annual_return_pct, inputs.years, inputs.compounding_freq)
    left, right = st.columns((5, 7))
    left.plotly_chart(allocation_pie_chart(res), use_container_width=True)
    right.plotly_chart(growth_line_chart(curve), use_container_width=True)

    st.subheader("Year-by-year Breakdown")
    df = breakdown_frame(session.breakdown)
    st.dataframe(
        df.round(2),
        use_container_width=True,
        hide_index=True,
    )
    st.download_button(
        "Download breakdown (CSV)",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=f"lumpsum_{inputs.mode.value}_{inputs.years}y.csv",
        mime="text/csv",
        use_container_width=True,
    )


def render_comparison(session: CalculatorSession) -> None:
    principal = session.result.initial_investment
    inputs = session.inputs
    cmp = compare_lumpsum_vs_sip(principal, inputs.annual_return_pct, inputs.years)

    st.subheader("Lumpsum vs. SIP")
    c1, c2, c3 = st.columns(3)
    c1.metric("Lumpsum Maturity", money(cmp.lumpsum_maturity))
    c2.metric("SIP Maturity", money(cmp.sip_maturity), delta=money(cmp.sip_advantage))
    c3.metric("Monthly SIP", f"{config.CURRENCY_SYMBOL}{group_indian(cmp.equivalent_monthly_sip)}")
    st.caption("The SIP splits the same principal evenly across every month of the period; lumpsum compounds annually.")
    st.plotly_chart(comparison_bar_chart(cmp), use_container_width=True)


# Render the full calculator inside the current Streamlit container.
def render_lumpsum_calculator() -> None:
    _init_state()
    st.caption("Project a one-time investment, or find the lumpsum needed to reach a goal.")

    st.markdown("**Quick scenarios**")
    p_cols = st.columns(len(config.SCENARIO_PRESETS) + 1)
    for col, name in zip(p_cols, config.SCENARIO_PRESETS):
        col.button(name.title(), key=f"preset_{name}", on_click=_apply_preset, args=(name,), use_container_width=True)
    p_cols[-1].button("Reset", key="reset", on_click=_reset, use_container_width=True)

    mode = render_inputs()

    session: CalculatorSession = st.session_state["calc_session"]
    session.submit(_read_form(), mode)
    session.flush()

    for message in session.errors.values():
        st.error(message)

    if session.result is None:
        st.info("Enter valid inputs to see results.")
        return
    if session.errors:
        st.caption("Showing the last valid calculation.")

    st.divider()
    render_results(session)

    st.divider()
    st.button("Compare with SIP", key="compare", on_click=_show_comparison)
    if st.session_state["show_comparison"]:
        render_comparison(session)

"""
Streamlit UI for the Plan Billing tool.

Features:
- Single bill calculator with resolution trace
- Batch billing from an uploaded CSV (quantity,category)
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from plan_billing.engine import BillingEngine, BillingRequest, PlanCategory
from plan_billing.engine.models import MAX_QUANTITY
from plan_billing.data.load_requests import requests_from_frame


st.set_page_config(
    page_title="Plan Billing",
    layout="centered",
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return BillingEngine()


try:
    engine = get_engine()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


st.title("Plan Billing")

tab1, tab2 = st.tabs(["⚡ Single Bill", "📄 Batch"])

with tab1:
    labels = [c.label for c in engine.factory.categories()]
    label = st.selectbox("Plan Category", options=labels)
    quantity = st.number_input("Units Consumed", min_value=0, max_value=MAX_QUANTITY, value=0, step=1)

    result = engine.calculate(BillingRequest(quantity=int(quantity), category=PlanCategory.parse(label)))
    st.metric("Bill", f"{result.currency_label} {result.amount_text}")
    st.caption(result.to_line())

    with st.expander("🔍 Resolution Details"):
        for t in result.trace:
            if t.value:
                st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
            else:
                st.caption(f"**{t.step}**: {t.description}")

with tab2:
    uploaded = st.file_uploader("Requests CSV (quantity,category)", type=["csv"])
    if uploaded is not None:
        try:
            requests = requests_from_frame(pd.read_csv(uploaded, dtype=str), source=uploaded.name)
        except ValueError as e:
            st.error(str(e))
        else:
            results = engine.run(requests)
            df = pd.DataFrame([r.to_dict() for r in results])
            st.table(df[["category", "quantity", "rate", "amount_text"]])
            st.metric("Total", f"{results[0].currency_label} {sum(r.amount for r in results)}" if results else "0")

import pandas as pd
import streamlit as st

# Configuration
from dashboard.config import get_config
from dashboard.logging import get_logger

# Document store factory + orders subsystem
from dashboard.data.models import OrdersLoadResult, OrdersViewState
from dashboard.data.util import get_document_store
from dashboard.orders.filtering import apply_view_state
from dashboard.orders.presenter import (
    build_order_detail,
    format_amount,
    pagination_caption,
    selected_order,
    status_style,
)
from dashboard.orders.print_surface import StreamlitPrintSurface
from dashboard.orders.receipt import print_receipt
from dashboard.orders.service import run_load

st.set_page_config(page_title="Orders | Admin Dashboard", layout="wide")

config = get_config()
logger = get_logger(__name__)

VIEW_KEY = "orders_view"
RESULT_KEY = "orders_result"

# -----------------------------------------------------------------------------
# View state (kept in the session as a plain dict, changed only via transitions)
# -----------------------------------------------------------------------------
view = OrdersViewState(**st.session_state.get(VIEW_KEY, {}))


def commit(new_view: OrdersViewState) -> None:
    global view
    view = new_view
    st.session_state[VIEW_KEY] = new_view.model_dump()


# -----------------------------------------------------------------------------
# Fetch cycle: once per visit, again only on an explicit reload
# -----------------------------------------------------------------------------
st.sidebar.header("Orders")
if st.sidebar.button("Reload orders"):
    st.session_state.pop(RESULT_KEY, None)

if RESULT_KEY not in st.session_state:
    with st.spinner("Loading orders..."):
        st.session_state[RESULT_KEY] = run_load(get_document_store).model_dump()
result = OrdersLoadResult(**st.session_state[RESULT_KEY])

# -----------------------------------------------------------------------------
# Header, search and sort
# -----------------------------------------------------------------------------
st.title("Orders")
st.caption("Manage all orders in your application.")

c1, c2 = st.columns([4, 1])
search = c1.text_input("Search orders...", value=view.search, placeholder="Order ID, customer, email or store")
if search != view.search:
    commit(view.set_search(search))

arrow = "↓" if view.sort_direction == "desc" else "↑"
if c2.button(f"Created At {arrow}", use_container_width=True):
    commit(view.toggle_sort())
    st.rerun()

# -----------------------------------------------------------------------------
# Orders table
# -----------------------------------------------------------------------------
if result.error:
    st.error(result.error)
    st.stop()

rows = apply_view_state(result.orders, view)
if not rows:
    st.info("No orders found.")
else:
    table = pd.DataFrame(
        [
            {
                "Order ID": o.id,
                "Customer": o.customer_name,
                "Customer Email": o.customer_email,
                "Store/Restaurant": o.venue_name,
                "Total": format_amount(o.total_amount),
                "Status": o.status,
                "Created At": o.created_at,
                "Modified By": o.modified_by,
                "Modified At": o.modified_at,
            }
            for o in rows
        ]
    )

    def _badge(status: str) -> str:
        background, color = status_style(status)
        return f"background-color: {background}; color: {color}; font-weight: 600"

    st.dataframe(table.style.map(_badge, subset=["Status"]), use_container_width=True, hide_index=True)
st.caption(pagination_caption(len(rows)))

# -----------------------------------------------------------------------------
# Order detail
# -----------------------------------------------------------------------------
if rows:
    ids = [o.id for o in rows]
    d1, d2 = st.columns([4, 1])
    chosen = d1.selectbox("Order", ids, index=None, placeholder="Select an order to view")
    if d2.button("View details", disabled=chosen is None, use_container_width=True):
        commit(view.select_order(chosen))

order = selected_order(result.orders, view)
if order is not None:
    detail = build_order_detail(order)
    with st.container(border=True):
        st.subheader(f"Order {order.id}")
        m1, m2, m3 = st.columns(3)
        m1.markdown(f"**Customer:** {order.customer_name or '-'}  \n**Email:** {order.customer_email or '-'}")
        m2.markdown(f"**Store/Restaurant:** {order.venue_name}  \n**Status:** {order.status}")
        m3.markdown(f"**Created At:** {order.created_at or '-'}  \n**Modified By:** {order.modified_by or '-'}")

        if order.items:
            st.dataframe(
                pd.DataFrame(
                    [
                        {
                            "Item": item.name,
                            "Qty": item.units,
                            "Price": format_amount(item.unit_price),
                            "Line Total": format_amount(item.line_total),
                        }
                        for item in order.items
                    ]
                ),
                use_container_width=True,
                hide_index=True,
            )
        else:
            st.caption("No items recorded for this order.")

        t1, t2, t3 = st.columns(3)
        t1.metric("Subtotal", format_amount(detail.subtotal))
        t2.metric("Discount", detail.discount_label)
        t3.metric("Total", format_amount(detail.total))

        b1, b2 = st.columns(2)
        if b1.button("Print receipt", use_container_width=True):
            logger.info(f"Printing receipt for order {order.id}")
            print_receipt(order, StreamlitPrintSurface())
        if b2.button("Close", use_container_width=True):
            commit(view.close_detail())
            st.rerun()

# -----------------------------------------------------------------------------
# Footer
# -----------------------------------------------------------------------------
with st.expander("Data source"):
    st.write(
        f"Orders are read through the **DocumentStore** interface "
        f"(`{config.document_backend}` backend, collection `{config.orders_collection}`). "
        "Store and restaurant names are resolved per load; search and sort run on the loaded list."
    )

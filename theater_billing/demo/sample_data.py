# theater_billing/demo/sample_data.py

from theater_billing.core.models import Invoice, Performance, Play

PLAYS = {
    "hamlet": Play(name="Hamlet", type="tragedy"),
    "as-like": Play(name="As You Like It", type="comedy"),
    "othello": Play(name="Othello", type="tragedy"),
}

INVOICE = Invoice(
    customer="BigCo",
    performances=(
        Performance(play_id="hamlet", audience=55),
        Performance(play_id="as-like", audience=35),
        Performance(play_id="othello", audience=40),
    )
)

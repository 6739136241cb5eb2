"""
Checkout app.

Order-side records that payment method integrations read from:
orders, payments, refund reasons and customer wallets.
"""

"""Authenticated ledger routes: metrics and transactions."""

from flask import Blueprint, jsonify, request

from ledgerapi.api.auth import json_body
from ledgerapi.api.context import current_identity, get_services
from ledgerapi.api.security import require_auth

ledger_bp = Blueprint("ledger", __name__)


@ledger_bp.route("/metrics", methods=["GET"])
@require_auth
def metrics():
    summary = get_services().ledger.summarize(
        user_id=current_identity().user_id,
        start_date=request.args.get("startDate"),
        end_date=request.args.get("endDate"),
    )
    net_change = float(summary.net_change)
    return jsonify(
        {
            "totalRevenue": float(summary.total_income),
            "totalExpenses": float(summary.total_expenses),
            "netChange": net_change,
            "cashFlow": net_change,
            "monthlyGrowth": summary.monthly_growth,
            "transactionCount": summary.transaction_count,
        }
    )


@ledger_bp.route("/transactions", methods=["GET"])
@require_auth
def list_transactions():
    page = get_services().ledger.list_transactions(
        user_id=current_identity().user_id,
        start_date=request.args.get("startDate"),
        end_date=request.args.get("endDate"),
        limit=request.args.get("limit"),
        offset=request.args.get("offset"),
    )
    return jsonify(
        {
            "transactions": [txn.to_dict() for txn in page.transactions],
            "pagination": {"limit": page.limit, "offset": page.offset, "count": page.count},
        }
    )


@ledger_bp.route("/transactions", methods=["POST"])
@require_auth
def create_transaction():
    data = json_body()
    # Ownership comes from the token; any user_id in the body is ignored
    txn = get_services().ledger.add_transaction(
        user_id=current_identity().user_id,
        date=data.get("date"),
        amount=data.get("amount"),
        type=data.get("type"),
        description=data.get("description"),
        category=data.get("category"),
    )
    return jsonify({"message": "Transaction added", "transaction": txn.to_dict()}), 201

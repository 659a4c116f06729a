"""Display messages written to the activity log."""


def settled_one(from_name: str, amount: int) -> str:
    return f"{from_name}님께 받은 {amount}VT 수령!"


def settled_all(total_amount: int, count: int) -> str:
    return f"{count}건, 총 {total_amount}VT 수령!"

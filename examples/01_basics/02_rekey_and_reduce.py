"""
Re-keying records with `bi_map`, collecting them with `to_array`, and
summing a column with `reduce_`.
"""
from reeks import bi_map, pass_through_key_func, reduce_, to_array

ORDERS = [
    {"id": "A-1", "customer": "ada", "total": 30},
    {"id": "A-2", "customer": "bob", "total": 0},
    {"id": "A-3", "customer": "ada", "total": 45},
]


def main():
    # Drop empty orders and key the rest by order id.
    by_id = to_array(
        bi_map(
            ORDERS,
            lambda key, order: order["id"] if order["total"] else None,
            lambda key, order: order["total"],
        ),
        pass_through_key_func(),
    )
    print("--- Orders by id ---")
    print(by_id)

    revenue = reduce_(by_id, lambda acc, order_id, total: acc + total, 0)
    print("--- Revenue ---")
    print(revenue)


if __name__ == "__main__":
    main()

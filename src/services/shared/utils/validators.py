from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    DynamoDB の数値（Decimal）と文字列で保存した金額の両方を受け付ける。
    float は str 経由で変換し、2進数表現の誤差を持ち込まない。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_id_string(v: object) -> object:
    """数値で送られてきた ID を文字列に揃える（bool は対象外）

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    """
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v

import numpy as np

def validate_dimensions(p):
    """
    Kiểm tra dãy kích thước ma trận.

    Parameters:
    - p: dãy n+1 số nguyên dương (n >= 1).

    Returns:
    - list các số int (bản sao mới).
    """
    if len(p) < 2:
        raise ValueError(f"Dãy kích thước cần ít nhất 2 phần tử (1 ma trận), nhưng chỉ có {len(p)}.")

    dims = []
    for index, value in enumerate(p):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"P[{index}] = {value!r} không phải số nguyên.")
        if value <= 0:
            raise ValueError(f"P[{index}] = {value} phải là số nguyên dương.")
        dims.append(int(value))
    return dims

def parse_dimensions(text):
    # Cho phép phân tách bằng dấu cách, xuống dòng hoặc dấu ','
    tokens = text.replace(",", " ").split()
    dims = []
    for token in tokens:
        try:
            dims.append(int(token))
        except ValueError:
            raise ValueError(f"'{token}' không phải số nguyên.") from None
    return dims

def random_matrix_count(rng=None, low=5, high=15):
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(low, high + 1))

def generate_random_dimensions(n, min_dim=1, max_dim=1000, rng=None):
    """ Sinh ngẫu nhiên n+1 kích thước trong đoạn [min_dim, max_dim] """
    if n < 1:
        raise ValueError(f"Cần ít nhất 1 ma trận, nhận được n = {n}.")
    if min_dim < 1 or min_dim > max_dim:
        raise ValueError(f"Khoảng kích thước không hợp lệ: [{min_dim}, {max_dim}].")
    if rng is None:
        rng = np.random.default_rng()

    dims = rng.integers(min_dim, max_dim + 1, size=n + 1)
    return [int(d) for d in dims]

def read_manual_dimensions(input_fn=input):
    count = parse_dimensions(input_fn("Nhập số lượng ma trận: "))
    if len(count) != 1:
        raise ValueError("Số lượng ma trận phải là một số nguyên.")
    n = count[0]
    if n < 1:
        raise ValueError(f"Cần ít nhất 1 ma trận, nhận được {n}.")

    # Dãy P có thể nhập trên nhiều dòng
    dims = parse_dimensions(input_fn(f"Nhập dãy kích thước P (gồm {n + 1} số):\n"))
    while len(dims) < n + 1:
        dims += parse_dimensions(input_fn(""))
    if len(dims) > n + 1:
        raise ValueError(f"Cần đúng {n + 1} kích thước, nhưng nhập {len(dims)}.")

    return validate_dimensions(dims)

def catalan_number(n):
    """
    Số Catalan thứ n: số cách đặt dấu ngoặc đầy đủ khác nhau.

    Parameters:
    - n: số nguyên không âm.

    Returns:
    - C(n) dưới dạng int của Python (không bị tràn số).
    """
    if n < 0:
        raise ValueError(f"n phải không âm, nhận được {n}.")
    if n <= 1:
        return 1

    cat = [0] * (n + 1)
    cat[0] = cat[1] = 1
    for i in range(2, n + 1):
        for j in range(i):
            cat[i] += cat[j] * cat[i - j - 1]
    return cat[n]


if __name__ == "__main__":
    for n in range(0, 11):
        print(f"C({n}) = {catalan_number(n)}")

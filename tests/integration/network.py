import numpy as np


def f(T0, T1, T2, T6):
    T3 = np.einsum(T0, (0, 1), T1, (1, 2, 3), T2, (3, 4), (0, 2, 4))
    T4, T5 = np.linalg.qr(T3.reshape((np.prod(T3.shape[:1]), np.prod(T3.shape[1:]))), mode="reduced")
    T5 = T5.reshape((T5.shape[0],) + T3.shape[1:])
    T7 = np.einsum(T5, (0, 1, 2), T6, (2,), (0, 1))
    return (T4, T7)

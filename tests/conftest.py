import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def mtcars():
    """A slice of the classic mtcars data"""
    return pd.DataFrame({
        'model': ['Mazda RX4', 'Datsun 710', 'Hornet 4 Drive', 'Valiant', 'Duster 360',
                  'Merc 240D', 'Merc 230', 'Merc 280', 'Fiat 128', 'Honda Civic',
                  'Toyota Corolla', 'Camaro Z28'],
        'mpg': [21.0, 22.8, 21.4, 18.1, 14.3, 24.4, 22.8, 19.2, 32.4, 30.4, 33.9, 13.3],
        'cyl': [6, 4, 6, 6, 8, 4, 4, 6, 4, 4, 4, 8],
        'hp': [110, 93, 110, 105, 245, 62, 95, 123, 66, 52, 65, 245],
        'wt': [2.620, 2.320, 3.215, 3.460, 3.570, 3.190, 3.150, 3.440, 2.200, 1.615, 1.835, 3.840],
        'am': [1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0],
        'gear': [4, 4, 3, 3, 3, 4, 4, 4, 4, 4, 4, 3],
    })


@pytest.fixture
def species():
    """iris like measurements for three species"""
    rng = np.random.RandomState(42)
    n = 20
    return pd.DataFrame({
        'species': ['setosa'] * n + ['versicolor'] * n + ['virginica'] * n,
        'sepal_length': np.concatenate([rng.normal(5.0, 0.35, n),
                                        rng.normal(5.9, 0.5, n),
                                        rng.normal(6.6, 0.6, n)]),
        'petal_length': np.concatenate([rng.normal(1.5, 0.2, n),
                                        rng.normal(4.3, 0.5, n),
                                        rng.normal(5.5, 0.5, n)]),
    })


@pytest.fixture
def sales():
    """monthly values for two regions"""
    dates = pd.date_range('2024-01-01', periods=12, freq='MS')
    return pd.DataFrame({
        'date': list(dates) * 2,
        'region': ['north'] * 12 + ['south'] * 12,
        'value': list(np.arange(12) * 10 + 100) + list(np.arange(12) * 5 + 80),
    })


@pytest.fixture
def red():
    """A DataFrame with a column that is also a color name"""
    return pd.DataFrame({'x': [1, 2, 3], 'y': [3, 1, 2], 'red': ['a', 'b', 'a']})

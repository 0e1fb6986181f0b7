## Utils
## @author: Luke Li

import time
import sympy
import random
import json
import os
import signal
from contextlib import contextmanager

# lambdas
random_list = lambda low, high, count: [random.randint(low, high) for _ in range(count)]

DEFAULT_CONFIG = {
    "DEFAULT_EXP_OPT": "binary",
    "DEFAULT_DOMAIN": "u64",
    "PROFILE": False,
    "PROFILE_RUNS": 100
}


def profiler(num_runs=100, enabled=True):
    def decorator(func):
        if not enabled:
            # If profiling is disabled, return the original function unmodified
            return func

        def wrapper(*args, **kwargs):
            total_time = 0
            for _ in range(num_runs):
                start_time = time.time()
                func(*args, **kwargs)
                end_time = time.time()
                total_time += (end_time - start_time)
            average_time = total_time / num_runs
            print(f"Average execution time for {func.__name__}: {average_time} seconds")
            return func(*args, **kwargs)

        wrapper.__name__ = func.__name__
        wrapper.__doc__ = func.__doc__
        return wrapper

    return decorator


def generate_large_primes(count, num_bits=128):
    """Generate a list of large prime numbers of specified bit length."""
    primes = []
    while len(primes) < count:
        prime = sympy.randprime(2 ** (num_bits - 1), 2 ** num_bits)
        primes.append(prime)
    return primes


def load_config():
    config_filename = 'config.json'

    # Determine the script directory (the project root is one level up)
    script_directory = os.path.dirname(os.path.abspath(__file__))
    project_root_config_path = os.path.join(script_directory, '..', config_filename)

    # Paths to check for the config file, an explicit FASTFIB_CONFIG_PATH wins
    paths_to_check = [
        os.path.join(os.getcwd(), config_filename),  # Current Working Directory
        os.path.normpath(project_root_config_path)  # Project Root Directory
    ]

    env_config_path = os.getenv('FASTFIB_CONFIG_PATH')
    if env_config_path:
        paths_to_check.insert(0, env_config_path)

    config = dict(DEFAULT_CONFIG)
    for path in paths_to_check:
        if os.path.exists(path):
            with open(path, 'r') as file:
                loaded = json.load(file)

            # only a json object can hold settings, anything else is skipped
            if isinstance(loaded, dict):
                config.update(loaded)
                return config

    # No config file found: fall back to the defaults, nothing is written to disk
    return config


class TimeoutException(Exception):
    pass


@contextmanager
def timeout(time):
    # Signal handler function
    def raise_timeout(signum, frame):
        raise TimeoutException()

    # Set the signal handler and a timer
    signal.signal(signal.SIGALRM, raise_timeout)
    signal.alarm(time)

    try:
        yield
    finally:
        # Disable the alarm
        signal.alarm(0)

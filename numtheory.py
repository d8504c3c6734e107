import enum
import logging
import operator
from dataclasses import dataclass
from time import perf_counter

logger = logging.getLogger(__name__)


# --- Data model ---

@dataclass(frozen=True)
class EuclideanStep:
    dividend: int
    divisor: int
    quotient: int
    remainder: int


@dataclass(frozen=True)
class StepBucket:
    steps: int
    occurrences: int
    example_pair: tuple


@dataclass(frozen=True)
class WorstCaseResult:
    scanned_upper_bound: int
    best_pair: tuple
    max_steps: int
    elapsed_time: float
    step_histogram: dict

    @property
    def histogram_rows(self):
        return [self.step_histogram[k] for k in sorted(self.step_histogram)]

    @property
    def elapsed_ms(self):
        return self.elapsed_time * 1000.0


@dataclass(frozen=True)
class ResidueTable:
    modulus: int
    modulus_is_prime: bool
    primes_up_to_modulus: list
    addition_table: list
    multiplication_table: list


# --- Primality and factorization ---

def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def primes_up_to(n: int) -> list:
    return [k for k in range(n + 1) if is_prime(k)]


def prime_factors(n: int) -> list:
    """
    Factor n by trial division into ascending (prime, multiplicity) pairs.
    Returns [] for n < 2.
    """
    groups = []
    if n < 2:
        return groups

    if n % 2 == 0:
        count = 0
        while n % 2 == 0:
            n //= 2
            count += 1
        groups.append((2, count))

    p = 3
    while p <= n // p:
        if n % p == 0:
            count = 0
            while n % p == 0:
                n //= p
                count += 1
            groups.append((p, count))
        p += 2

    # whatever survives the loop has no divisor <= its square root
    if n > 1:
        groups.append((n, 1))
    return groups


def flatten_factors(groups) -> list:
    flat = []
    for prime, multiplicity in groups:
        flat.extend([prime] * multiplicity)
    return flat


# --- Euclidean algorithm ---

def traced_gcd(a: int, b: int):
    """
    Run the Euclidean algorithm on (a, b) and return (gcd, steps), one
    EuclideanStep per division. gcd(a, 0) == a with no steps.
    """
    steps = []
    while b != 0:
        q, r = divmod(a, b)
        steps.append(EuclideanStep(a, b, q, r))
        a, b = b, r
    return a, steps


def scan_worst_case(upper_bound: int) -> WorstCaseResult:
    """
    Visit every pair (i, j) with 1 <= j < i < upper_bound and find the one
    needing the most Euclidean steps. The first pair in scan order wins ties.

    Only the double loop is timed; ordering the histogram is presentation and
    happens after the clock stops.
    """
    max_steps = 0
    best_pair = (0, 0)
    # step count -> [occurrences, first pair seen]
    tally = {}

    start = perf_counter()
    for i in range(1, upper_bound):
        for j in range(1, i):
            _, steps = traced_gcd(i, j)
            n_steps = len(steps)
            if n_steps > max_steps:
                max_steps = n_steps
                best_pair = (i, j)
            entry = tally.get(n_steps)
            if entry is None:
                tally[n_steps] = [1, (i, j)]
            else:
                entry[0] += 1
    elapsed = perf_counter() - start

    histogram = {
        n_steps: StepBucket(n_steps, count, pair)
        for n_steps, (count, pair) in sorted(tally.items())
    }
    logger.debug(
        "worst-case scan below %d: best pair %s with %d steps, %d pairs in %.3fs",
        upper_bound, best_pair, max_steps,
        sum(b.occurrences for b in histogram.values()), elapsed,
    )
    return WorstCaseResult(
        scanned_upper_bound=upper_bound,
        best_pair=best_pair,
        max_steps=max_steps,
        elapsed_time=elapsed,
        step_histogram=histogram,
    )


# --- Residue classes ---

class ResidueOp(enum.Enum):
    ADD = "+"
    MULTIPLY = "·"


_residue_ops = {
    ResidueOp.ADD: operator.add,
    ResidueOp.MULTIPLY: operator.mul,
}


def residue_table(modulus: int, op: ResidueOp) -> list:
    """Square table indexed 0..=modulus with entry op(r, c) reduced mod modulus."""
    if modulus < 1:
        raise ValueError(f"Modulus must be at least 1, got {modulus}")
    fn = _residue_ops[op]
    size = modulus + 1
    # Python's % already has the sign of the divisor, so entries are in [0, modulus)
    return [[fn(r, c) % modulus for c in range(size)] for r in range(size)]


def build_residue_tables(modulus: int) -> ResidueTable:
    if modulus < 1:
        raise ValueError(f"Modulus must be at least 1, got {modulus}")
    return ResidueTable(
        modulus=modulus,
        modulus_is_prime=is_prime(modulus),
        primes_up_to_modulus=primes_up_to(modulus),
        addition_table=residue_table(modulus, ResidueOp.ADD),
        multiplication_table=residue_table(modulus, ResidueOp.MULTIPLY),
    )

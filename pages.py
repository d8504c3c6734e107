# Jinja templates for the explorer pages, rendered with render_template_string.
# Every page shares the same head and card layout (Tailwind CSS).

_HEAD = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <script src="https://cdn.tailwindcss.com"></script>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;700&display=swap" rel="stylesheet">
    <style>
        body {
            font-family: 'Inter', sans-serif;
        }
    </style>
</head>
<body class="bg-gray-100 flex items-center justify-center min-h-screen py-8">
    <div class="bg-white p-8 rounded-lg shadow-lg w-full max-w-3xl">
        <h1 class="text-2xl font-bold text-center text-gray-800 mb-2">{{ title }}</h1>
"""

_FOOT = """
        <p class="mt-6 text-center"><a href="{{ url_for('index') }}" class="text-indigo-600 hover:underline">Back to overview</a></p>
    </div>
</body>
</html>
"""

_INPUT = "mt-1 block w-full px-3 py-2 bg-white border border-gray-300 rounded-md shadow-sm placeholder-gray-400 focus:outline-none focus:ring-indigo-500 focus:border-indigo-500 sm:text-sm"
_BUTTON = "w-full flex justify-center py-2 px-4 border border-transparent rounded-md shadow-sm text-sm font-medium text-white bg-indigo-600 hover:bg-indigo-700 focus:outline-none focus:ring-2 focus:ring-offset-2 focus:ring-indigo-500"
_CELL = "border border-gray-200 px-2 py-1 text-right"


def _page(body):
    return _HEAD + body.replace("%INPUT%", _INPUT).replace("%BUTTON%", _BUTTON).replace("%CELL%", _CELL) + _FOOT


INDEX_TEMPLATE = _page("""
        <p class="text-center text-gray-500 mb-6">
            Enter a number or an expression. You can use operators: +, -, *, /, %, ^, (, ).
        </p>

        <form action="{{ url_for('index') }}" method="post" class="space-y-4">
            <div>
                <label for="number" class="block text-sm font-medium text-gray-700">Number to Test</label>
                <input type="text" name="number" id="number" class="%INPUT%"
                       placeholder="e.g., 29 or (5*6)-1"
                       value="{{ last_input or '' }}">
            </div>
            <div class="flex items-center space-x-4">
                <button type="submit" class="%BUTTON%">Test Number</button>
                <a href="{{ url_for('index') }}"
                   class="w-full flex justify-center py-2 px-4 border border-gray-300 rounded-md shadow-sm text-sm font-medium text-gray-700 bg-white hover:bg-gray-50">
                    Clear
                </a>
            </div>
        </form>

        {% if result %}
        <div class="mt-6">
            <label for="result" class="block text-sm font-medium text-gray-700">Result</label>
            <div id="result" class="mt-1 p-3 w-full bg-gray-50 border border-gray-200 rounded-md text-gray-800">
                {{ result }}
            </div>
        </div>
        {% endif %}

        <h2 class="text-lg font-bold text-gray-800 mt-8 mb-2">Euclidean algorithm</h2>
        <form action="{{ url_for('euclidean_form') }}" method="get" class="flex space-x-2">
            <input type="text" name="a" class="%INPUT%" placeholder="a, e.g. 54">
            <input type="text" name="b" class="%INPUT%" placeholder="b, e.g. 24">
            <button type="submit" class="%BUTTON%">gcd(a, b)</button>
        </form>

        <h2 class="text-lg font-bold text-gray-800 mt-6 mb-2">Worst case of the Euclidean algorithm</h2>
        <form action="{{ url_for('worst_case_form') }}" method="get" class="flex space-x-2">
            <input type="text" name="upper" class="%INPUT%" placeholder="upper bound (max {{ max_scan_bound }})">
            <button type="submit" class="%BUTTON%">Scan</button>
        </form>

        <h2 class="text-lg font-bold text-gray-800 mt-6 mb-2">Integer factorization</h2>
        <form action="{{ url_for('factorization_form') }}" method="get" class="flex space-x-2">
            <input type="text" name="number" class="%INPUT%" placeholder="e.g. 2^10 - 1">
            <button type="submit" class="%BUTTON%">Factor</button>
        </form>

        <h2 class="text-lg font-bold text-gray-800 mt-6 mb-2">Residue classes</h2>
        <form action="{{ url_for('residue_form') }}" method="get" class="flex space-x-2">
            <input type="text" name="modulus" class="%INPUT%" placeholder="modulus (max {{ max_modulus }})">
            <button type="submit" class="%BUTTON%">Tables</button>
        </form>
""")

EUCLIDEAN_TEMPLATE = _page("""
        <p class="text-center text-gray-700 mb-6">gcd({{ a }}, {{ b }}) = <strong>{{ gcd }}</strong></p>
        {% if steps %}
        <table class="mx-auto border-collapse">
            <thead>
                <tr class="bg-gray-50">
                    <th class="%CELL%">dividend</th><th class="%CELL%">divisor</th>
                    <th class="%CELL%">quotient</th><th class="%CELL%">remainder</th>
                </tr>
            </thead>
            <tbody>
            {% for step in steps %}
                <tr>
                    <td class="%CELL%">{{ step.dividend }}</td>
                    <td class="%CELL%">{{ step.divisor }}</td>
                    <td class="%CELL%">{{ step.quotient }}</td>
                    <td class="%CELL%">{{ step.remainder }}</td>
                </tr>
            {% endfor %}
            </tbody>
        </table>
        <p class="mt-4 text-center text-gray-500">{{ steps|length }} step{{ 's' if steps|length != 1 }}:
            {% for step in steps %}{{ step.dividend }} = {{ step.quotient }} · {{ step.divisor }} + {{ step.remainder }}{% if not loop.last %}; {% endif %}{% endfor %}
        </p>
        {% else %}
        <p class="text-center text-gray-500">No division needed, the second number is 0.</p>
        {% endif %}
""")

WORST_CASE_TEMPLATE = _page("""
        <div class="text-gray-700 space-y-1 mb-6">
            <p>Scanned all pairs j &lt; i &lt; {{ result.scanned_upper_bound }}.</p>
            <p>Worst pair: <strong>({{ result.best_pair[0] }}, {{ result.best_pair[1] }})</strong>
               with <strong>{{ result.max_steps }}</strong> steps.</p>
            <p>Time: {{ '%.1f' % result.elapsed_ms }} ms</p>
        </div>
        {% if result.histogram_rows %}
        <table class="mx-auto border-collapse">
            <thead>
                <tr class="bg-gray-50">
                    <th class="%CELL%">steps</th><th class="%CELL%">pairs</th><th class="%CELL%">first example</th>
                </tr>
            </thead>
            <tbody>
            {% for bucket in result.histogram_rows %}
                <tr>
                    <td class="%CELL%">{{ bucket.steps }}</td>
                    <td class="%CELL%">{{ bucket.occurrences }}</td>
                    <td class="%CELL%">
                        <a class="text-indigo-600 hover:underline"
                           href="{{ url_for('euclidean_algorithm', a=bucket.example_pair[0], b=bucket.example_pair[1]) }}">
                            ({{ bucket.example_pair[0] }}, {{ bucket.example_pair[1] }})
                        </a>
                    </td>
                </tr>
            {% endfor %}
            </tbody>
        </table>
        {% endif %}
""")

FACTORIZATION_TEMPLATE = _page("""
        {% if factors %}
        <p class="text-center text-gray-700">{{ number }} = <strong>{{ factors|join(' · ') }}</strong></p>
        <p class="text-center text-gray-500 mt-2">{{ number }} =
            {% for prime, multiplicity in groups %}{{ prime }}{% if multiplicity > 1 %}<sup>{{ multiplicity }}</sup>{% endif %}{% if not loop.last %} · {% endif %}{% endfor %}
        </p>
        {% else %}
        <p class="text-center text-gray-500">{{ number }} has no prime factors.</p>
        {% endif %}
""")

RESIDUE_TEMPLATE = _page("""
        <p class="text-center text-gray-700">{{ table.modulus }} is {{ 'prime' if table.modulus_is_prime else 'not prime' }}.</p>
        <p class="text-center text-gray-500 mb-6">Primes up to {{ table.modulus }}: {{ table.primes_up_to_modulus|join(', ') or 'none' }}</p>
        {% for op, rows in ops %}{% set symbol = op.value %}
        <h2 class="text-lg font-bold text-gray-800 mt-4 mb-2">{{ symbol }} mod {{ table.modulus }}</h2>
        <div class="overflow-x-auto">
        <table class="mx-auto border-collapse text-sm">
            <tr class="bg-gray-50">
                <th class="%CELL%">{{ symbol }}</th>
                {% for c in range(rows|length) %}<th class="%CELL%">{{ c }}</th>{% endfor %}
            </tr>
            {% for row in rows %}
            <tr>
                <th class="%CELL% bg-gray-50">{{ loop.index0 }}</th>
                {% for value in row %}<td class="%CELL%">{{ value }}</td>{% endfor %}
            </tr>
            {% endfor %}
        </table>
        </div>
        {% endfor %}
""")

ERROR_TEMPLATE = _page("""
        <div id="result" class="mt-4 p-3 w-full bg-red-50 border border-red-200 rounded-md text-red-800">
            Error: {{ message }}
        </div>
""")

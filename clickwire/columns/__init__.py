"""Typed columns: numbers, strings, dates, decimals, enums, arrays, nullables and tuples."""
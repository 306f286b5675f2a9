"""
Core of intcalc: errors, settings, variables, IR and the expression language.
"""

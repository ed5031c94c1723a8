"""Naming linter for SASS/SCSS stylesheets.

The `sass_naming` package checks CSS class names and SCSS variable and
mixin names against the naming guide grammar:

    [<namespace>-]<componentName>[--modifierName|-descendantName]

Key features:
- structural tokenizer and ordered, independently testable rules;
- single-cause failure reasons for every rejected name;
- heuristic extraction of names from SCSS and CSS sources;
- a command-line tool and an opt-in pytest plugin;
- third-party rules through the `sass_naming_rules` entry point group.
"""

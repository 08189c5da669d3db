"""
Services for unitgraph.

graph/ evaluates build descriptions into unit graphs and packages,
planning/ turns them into runnable actions, description/ loads the TOML
build description.
"""

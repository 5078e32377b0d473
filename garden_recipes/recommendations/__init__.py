"""
Recommendation engine: converts a species catalog plus grower constraints
into a bounded, compatible planting recipe with human-readable notes.

Modules
-------
rules        : Fixed rule tables (antagonist groups, habits, shade list,
               goal profiles) and scoring constants.
name_index   : Cached name normalization + antagonist group memberships.
classifier   : is_antagonist() + is_explicit_companion().
scorer       : companion_score() + compute_goal_score(), pure functions.
selector     : feasibility filter, ranking and greedy pick_recipe().
synergy      : get_synergy_notes(), presentation only.
succession   : suggest_succession(), what to plant after a harvest.
instructions : get_plain_instructions(), beginner planting steps.
reporter     : write_recipe_json(), file output.
"""

"""Console report handlers for neural models, tools, hive-mind and basic subsystems."""
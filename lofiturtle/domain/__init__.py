"""Domain entities, value objects and repository interfaces."""
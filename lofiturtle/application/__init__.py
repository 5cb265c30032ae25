"""Use cases, data transfer objects and the library service."""
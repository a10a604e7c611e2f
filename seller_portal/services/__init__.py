"""Domain services shared by the API routers"""

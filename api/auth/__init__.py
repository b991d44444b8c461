"""
Static bearer-key auth shared by every protected router.
"""

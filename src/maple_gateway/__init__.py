"""MapleStory 캐릭터 데이터 게이트웨이"""
